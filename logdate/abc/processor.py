"""Abstract module for processors"""

import logging
from abc import abstractmethod
from typing import List

from attrs import Factory, define, field, validators

from logdate.abc.component import Component
from logdate.metrics.metrics import CounterMetric, HistogramMetric, Metric
from logdate.processor.base.exceptions import ProcessingWarning
from logdate.util.helper import add_tags, has_dotted_field

logger = logging.getLogger("Processor")


@define(kw_only=True)
class ProcessorResult:
    """
    Result object to be returned by every processor. It contains the processor name,
    the warnings raised while processing and whether the processor matched the event.

    Parameters
    ----------

    processor_name : str
        The name of the processor
    event: Optional[dict]
        A reference to the event that was processed
    warnings : Optional[list]
        The warnings that occurred during processing
    matched : bool
        True if the processor wrote its result to the event
    """

    warnings: list = field(
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(ProcessingWarning),
            iterable_validator=validators.instance_of(list),
        ),
        factory=list,
    )
    """ The warnings that occurred during processing """
    processor_name: str = field(validator=validators.instance_of(str))
    """ The name of the processor """
    event: dict = field(validator=validators.optional(validators.instance_of(dict)), default=None)
    """ A reference to the event that was processed """
    matched: bool = field(validator=validators.instance_of(bool), default=False)
    """ Signals the pipeline that the processor has applied its result to the event """


class Processor(Component):
    """Abstract Processor Class to define the Interface.

    :code:`process` is the only method a pipeline needs to call. It never raises for
    problems with a single event; those are reported as warnings in the returned
    :code:`ProcessorResult` and the event is tagged with :code:`tag_on_failure`.
    """

    @define(kw_only=True, slots=False, frozen=True)
    class Config(Component.Config):
        """Common Configurations"""

        tag_on_failure: List[str] = field(
            validator=[
                validators.instance_of(list),
                validators.deep_iterable(member_validator=validators.instance_of(str)),
            ],
            converter=lambda x: list(dict.fromkeys(x)) if isinstance(x, (list, tuple)) else x,
            default=Factory(lambda self: [f"_{self.type}_failure"], takes_self=True),
        )
        """A list of tags which will be appended to the event on non critical errors,
        defaults to :code:`["_<type>_failure"]`. Duplicates are removed, the order is kept.
        An empty list disables tagging."""

    @define(kw_only=True)
    class Metrics(Component.Metrics):
        """Tracks statistics about a processor"""

        number_of_processed_events: CounterMetric = field(
            factory=lambda: CounterMetric(
                description="Number of events that were processed",
                name="number_of_processed_events",
            )
        )
        """Number of events that were processed"""
        number_of_warnings: CounterMetric = field(
            factory=lambda: CounterMetric(
                description="Number of warnings that occurred while processing events",
                name="number_of_warnings",
            )
        )
        """Number of warnings that occurred while processing events"""
        processing_time_per_event: HistogramMetric = field(
            factory=lambda: HistogramMetric(
                description="Time in seconds that it took to process an event",
                name="processing_time_per_event",
            )
        )
        """Time in seconds that it took to process an event"""

    __slots__: List[str] = []

    @property
    def metric_labels(self) -> dict:
        """Return metric labels."""
        return {
            "component": "processor",
            "description": self.describe(),
            "type": self._config.type,
            "name": self.name,
        }

    @property
    def failure_tags(self) -> List[str]:
        """the tags appended to events that could not be processed"""
        return self._config.tag_on_failure

    def process(self, event: dict) -> ProcessorResult:
        """Process a log event.

        Parameters
        ----------
        event : dict
           A dictionary representing a log event.

        Returns
        -------
        ProcessorResult
            A ProcessorResult object containing the processed event, the warnings
            and the matched state.

        """
        result = ProcessorResult(processor_name=self.name, event=event)
        logger.debug("%s processing event %s", self.describe(), event)
        self._apply_wrapper(event, result)
        self.metrics.number_of_processed_events += 1
        return result

    @Metric.measure_time()
    def _apply_wrapper(self, event: dict, result: ProcessorResult):
        try:
            self._apply(event, result)
        except ProcessingWarning as error:
            self._handle_warning_error(event, result, error)
        except Exception as error:  # pylint: disable=broad-except
            logger.warning("%s failed processing event: %s", self.describe(), error)
            self._handle_warning_error(event, result, ProcessingWarning(str(error), event))

    @abstractmethod
    def _apply(self, event: dict, result: ProcessorResult): ...  # pragma: no cover

    @staticmethod
    def _field_exists(event: dict, dotted_field: str) -> bool:
        return has_dotted_field(event, dotted_field)

    def _handle_warning_error(self, event, result, error, failure_tags=None):
        if failure_tags is None:
            failure_tags = self.failure_tags
        add_tags(event, [*failure_tags, *error.tags])
        self.metrics.number_of_warnings += 1
        result.warnings.append(error)

    def setup(self):
        super().setup()
        _ = self.metrics  # initialize metrics to show them on startup
