"""treesmith — synthesize directory hierarchies from templates, lists and trees."""

__version__ = "0.1.0"
