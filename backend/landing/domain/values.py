"""
Tagged representation of ``config_data`` values.

Stored JSON holds either a plain scalar (legacy single-locale override) or a
``{lang: value}`` object. Code that resolves text works on the tagged
``Scalar`` / ``LocalizedMap`` forms instead of inspecting raw JSON.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Scalar:
    value: Any

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class LocalizedMap:
    # Tuple of pairs keeps insertion order and stays hashable.
    entries: Tuple[Tuple[str, Any], ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, values: Mapping[str, Any]) -> "LocalizedMap":
        return cls(tuple((str(lang), text) for lang, text in values.items()))

    def get(self, language: str) -> Any:
        for lang, text in self.entries:
            if lang == language:
                return text
        return None

    def items(self) -> Iterator[Tuple[str, Any]]:
        return iter(self.entries)

    def with_entry(self, language: str, text: Any) -> "LocalizedMap":
        merged = dict(self.entries)
        merged[language] = text
        return LocalizedMap.of(merged)

    def to_json(self) -> Dict[str, Any]:
        return dict(self.entries)


ConfigValue = Union[Scalar, LocalizedMap]


def decode_value(raw: Any) -> Optional[ConfigValue]:
    """Stored JSON -> tagged value. ``None`` means absent."""
    if raw is None:
        return None
    if isinstance(raw, (Scalar, LocalizedMap)):
        return raw
    if isinstance(raw, Mapping):
        return LocalizedMap.of(raw)
    return Scalar(raw)


def encode_value(value: Optional[ConfigValue]) -> Any:
    if value is None:
        return None
    return value.to_json()


def decode_config(config_data: Optional[Mapping[str, Any]]) -> Dict[str, ConfigValue]:
    return {
        key: decoded
        for key, decoded in ((k, decode_value(v)) for k, v in (config_data or {}).items())
        if decoded is not None
    }


def encode_config(values: Mapping[str, ConfigValue]) -> Dict[str, Any]:
    return {key: encode_value(value) for key, value in values.items()}
