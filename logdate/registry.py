"""module for processor registry
it is used to check if a processor is known to the system.
you have to register new processors here by import them and add to `Registry.mapping`
"""

from typing import Dict, Type

from logdate.abc.processor import Processor
from logdate.processor.date_formatter.processor import DateFormatter


class Registry:
    """Component Registry"""

    mapping: Dict[str, Type[Processor]] = {
        "date_formatter": DateFormatter,
    }

    @classmethod
    def get_class(cls, component_type: str) -> Type[Processor]:
        """return the processor class for a given type

        Parameters
        ----------
        component_type : str
            the processor type

        Returns
        -------
        Type[Processor]
            the registered processor class

        Raises
        ------
        ValueError
            if the type is not registered
        """
        processor_class = cls.mapping.get(component_type)
        if processor_class is None:
            raise ValueError(f"Unknown processor type: {component_type}")
        return processor_class
