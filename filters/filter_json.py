"""Normalize JSON log messages before recording them."""

from __future__ import annotations

import copy
import json
from typing import Any, Callable


JsonObject = dict[str, Any]


class JsonFilter:
    """
    Rewrites keys of a JSON object that vary between runs.

    Example:
        JsonFilter('{"pid": 4711, "msg": "started"}').transform_objects(
            lambda obj: obj.update(pid=0) if "pid" in obj else None
        ).to_str()
        # '{"pid":0,"msg":"started"}'

    The visitor is called on the top-level object and on every object
    nested as a value of another object. Objects inside arrays are not
    visited.
    """

    def __init__(self, data: str | JsonObject) -> None:
        if isinstance(data, str):
            data = json.loads(data)
        else:
            data = copy.deepcopy(data)
        if not isinstance(data, dict):
            raise ValueError("JsonFilter expects a JSON object")
        self._json: JsonObject = data

    def transform_objects(self, visitor: Callable[[JsonObject], Any]) -> JsonFilter:
        self._transform_object(self._json, visitor)
        return self

    def remove_keys(self, *keys: str) -> JsonFilter:
        """Drop ``keys`` from every visited object."""

        def drop(obj: JsonObject) -> None:
            for key in keys:
                obj.pop(key, None)

        return self.transform_objects(drop)

    def replace_values(self, **values: Any) -> JsonFilter:
        """Overwrite the value of each given key wherever it is present."""

        def replace(obj: JsonObject) -> None:
            for key, value in values.items():
                if key in obj:
                    obj[key] = value

        return self.transform_objects(replace)

    def to_str(self) -> str:
        """Return the filtered object as minified JSON."""
        return json.dumps(self._json, separators=(",", ":"), ensure_ascii=False)

    def to_json(self) -> JsonObject:
        return copy.deepcopy(self._json)

    def _transform_object(
        self, obj: JsonObject, visitor: Callable[[JsonObject], Any]
    ) -> None:
        visitor(obj)
        for value in obj.values():
            if isinstance(value, dict):
                self._transform_object(value, visitor)
