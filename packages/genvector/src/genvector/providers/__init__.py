"""
Concrete Arithmetic Providers.

Each module here is declared by a YAML file in ../provider_configs/ and
imported lazily by genvector.registry on first use.
"""
