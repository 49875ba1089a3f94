from .importing import import_string, load_module_from_source

__all__ = ["import_string", "load_module_from_source"]
