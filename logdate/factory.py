"""This module contains a factory to create processors."""

from prometheus_client import CollectorRegistry

from logdate.abc.component import Component
from logdate.configuration import Configuration
from logdate.factory_error import (
    InvalidConfigSpecificationError,
    InvalidConfigurationError,
)


class Factory:
    """Create components for logdate."""

    @classmethod
    def create(
        cls, configuration: dict, registry: CollectorRegistry | None = None
    ) -> Component | None:
        """Create component.

        Parameters
        ----------
        configuration : dict
            a mapping with exactly one entry from the component name to its
            configuration, e.g. :code:`{"my_formatter": {"type": "date_formatter", ...}}`
        registry : CollectorRegistry, optional
            the prometheus registry the component registers its metrics with

        Returns
        -------
        Component
            the configured component

        Raises
        ------
        InvalidConfigurationError
            if the definition is empty, ambiguous or rejected by the component
        """
        if configuration == {} or configuration is None:
            raise InvalidConfigurationError("The component definition is empty.")
        if not isinstance(configuration, dict):
            raise InvalidConfigSpecificationError()
        if len(configuration) > 1:
            raise InvalidConfigurationError(
                f"Found multiple component definitions ({', '.join(configuration.keys())}),"
                + " but there must be exactly one."
            )
        for component_name, component_configuration_dict in configuration.items():
            if component_configuration_dict is None:
                raise InvalidConfigurationError(
                    f'The definition of component "{component_name}" is empty.'
                )
            if not isinstance(component_configuration_dict, dict):
                raise InvalidConfigSpecificationError(component_name)
            component = Configuration.get_class(component_name, component_configuration_dict)
            component_configuration = Configuration.create(
                component_name, component_configuration_dict
            )
            return component(component_name, component_configuration, registry)
        return None
