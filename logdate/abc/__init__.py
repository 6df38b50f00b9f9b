# pylint: disable=missing-docstring
from .component import Component
from .processor import Processor
