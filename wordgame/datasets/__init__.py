from .validator import validate_dictionary, pretty_summary
from .dictionary import Dictionary, DictionaryLoadError, load_dictionary

__all__ = ["validate_dictionary", "pretty_summary", "Dictionary", "DictionaryLoadError",
           "load_dictionary"]
