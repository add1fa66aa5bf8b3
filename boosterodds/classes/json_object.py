"""
Booster Odds Top Level Object
"""
import abc
from typing import Any, Dict, Iterable


class JsonObject(abc.ABC):
    """
    Top level Json Dump object class
    """

    # Attribute name => output key, where they differ
    json_key_map: Dict[str, str] = {}

    def build_keys_to_skip(self) -> Iterable[str]:
        """
        Determine what keys should be avoided in the JSON dump
        :return Keys to avoid
        """
        return {}

    def to_json(self) -> Any:
        """
        Support orjson.dumps()
        :return: JSON serialized object
        """
        skip_keys = self.build_keys_to_skip()

        return {
            self.json_key_map.get(key, key): value
            for key, value in self.__dict__.items()
            if "__" not in key and not callable(value) and key not in skip_keys
        }
