from .yaml_seed_loader import YamlSeedLoader

__all__ = ["YamlSeedLoader"]
