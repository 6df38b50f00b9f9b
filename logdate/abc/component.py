"""abstract module for components"""

import functools
import inspect
import logging
from abc import ABC
from functools import cached_property

from attrs import asdict, define, field, validators
from prometheus_client import CollectorRegistry

from logdate.metrics.metrics import Metric
from logdate.util.helper import camel_to_snake

logger = logging.getLogger("Component")


class Component(ABC):
    """Abstract Component Class to define the Interface"""

    @define(kw_only=True, slots=False, frozen=True)
    class Config:
        """Common Configurations
        This class is used to define the configuration of the component.
        It is frozen because the configuration should not be changed after initialization.
        """

        type: str = field(validator=validators.instance_of(str))
        """Type of the component"""

    @define(kw_only=True)
    class Metrics:
        """Base Metric class to track and expose statistics about logdate"""

        _labels: dict
        _registry: CollectorRegistry = field(default=None)
        """registry to expose the metrics with, none keeps them unregistered"""

        def __attrs_post_init__(self):
            for attribute in asdict(self, recurse=False):
                attribute = getattr(self, attribute)
                if isinstance(attribute, Metric):
                    attribute.labels = self._labels
                    if self._registry is not None:
                        attribute._registry = self._registry  # pylint: disable=protected-access
                    attribute.init_tracker()

    # __dict__ is added to support functools.cached_property
    __slots__ = ["name", "_config", "_registry", "__dict__"]

    # instance attributes
    name: str
    _config: Config
    _registry: CollectorRegistry | None

    @property
    def metric_labels(self) -> dict:
        """Labels for the metrics"""
        return {"component": self._config.type, "name": self.name, "description": "", "type": ""}

    def __init__(
        self,
        name: str,
        configuration: "Component.Config",
        registry: CollectorRegistry | None = None,
    ):
        self._config = configuration
        self.name = name
        self._registry = registry

    @cached_property
    def metrics(self):
        """create and return metrics object"""
        return self.Metrics(labels=self.metric_labels, registry=self._registry)

    def __repr__(self):
        return camel_to_snake(self.__class__.__name__)

    def describe(self) -> str:
        """Provide a brief name-like description of the component.

        The description is indicating its type _and_ the name provided when creating it.

        Examples
        --------

        >>> DateFormatter(name)

        """
        return f"{self.__class__.__name__} ({self.name})"

    def setup(self):
        """Set the component up."""
        self._populate_cached_properties()
        logger.debug("Set up %s", self.describe())

    def _populate_cached_properties(self):
        _ = [
            getattr(self, name)
            for name, value in inspect.getmembers(type(self))
            if isinstance(value, functools.cached_property)
        ]

    def shut_down(self):
        """Stop processing of this component.

        Optional: Called when stopping the pipeline

        """
        if hasattr(self, "__dict__"):
            self.__dict__.clear()
