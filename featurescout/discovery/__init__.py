"""
Feature discovery.

Contains the selector synthesizer, the per-category discoverers and
the aggregator that merges their output.

Exports:
- SelectorSynthesizer: locator synthesis cascade
- BaseDiscoverer: abstract category discoverer
- ButtonDiscoverer, InputDiscoverer: interactive controls
- MenuDiscoverer, DropdownDiscoverer, TabDiscoverer: navigation
- ChartDiscoverer, PanelDiscoverer, ModalDiscoverer, TableDiscoverer,
  CustomComponentDiscoverer: structural components
- DiscoveryAggregator: ordered merge with locator deduplication
"""

from featurescout.discovery.selector import SelectorSynthesizer
from featurescout.discovery.base_discoverer import BaseDiscoverer
from featurescout.discovery.buttons import ButtonDiscoverer
from featurescout.discovery.inputs import InputDiscoverer
from featurescout.discovery.navigation import MenuDiscoverer, DropdownDiscoverer, TabDiscoverer
from featurescout.discovery.components import (
    ComponentDiscoverer,
    ChartDiscoverer,
    PanelDiscoverer,
    ModalDiscoverer,
    TableDiscoverer,
    CustomComponentDiscoverer,
)
from featurescout.discovery.aggregator import DiscoveryAggregator, default_discoverers

__all__ = [
    "SelectorSynthesizer",
    "BaseDiscoverer",
    "ButtonDiscoverer",
    "InputDiscoverer",
    "MenuDiscoverer",
    "DropdownDiscoverer",
    "TabDiscoverer",
    "ComponentDiscoverer",
    "ChartDiscoverer",
    "PanelDiscoverer",
    "ModalDiscoverer",
    "TableDiscoverer",
    "CustomComponentDiscoverer",
    "DiscoveryAggregator",
    "default_discoverers",
]
