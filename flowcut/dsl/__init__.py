"""Loading of YAML/JSON network documents."""

from flowcut.dsl.loader import NetworkDocument, load_network_yaml

__all__ = ["NetworkDocument", "load_network_yaml"]
