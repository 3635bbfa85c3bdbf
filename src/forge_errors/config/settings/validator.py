"""Config settings – SettingsValidator."""
from __future__ import annotations

import dataclasses
from typing import Any, NamedTuple

_SCALAR_TYPES: dict[str, tuple[type, ...]] = {
    "bool": (bool,),
    "int": (int,),
    "float": (int, float),
    "str": (str,),
}


class SettingIssue(NamedTuple):
    """One field of a settings instance that does not match its declaration."""

    name: str
    value: Any
    reason: str


def _type_name(type_hint: Any) -> str:
    if isinstance(type_hint, str):
        return type_hint
    return getattr(type_hint, "__name__", repr(type_hint))


def _accepted_types(type_hint: Any) -> tuple[type, ...] | None:
    # annotations are strings under ``from __future__ import annotations``
    name = _type_name(type_hint)
    if name.startswith("list") or getattr(type_hint, "__origin__", None) is list:
        return (list,)
    return _SCALAR_TYPES.get(name)


def _has_type(value: Any, accepted: tuple[type, ...]) -> bool:
    if isinstance(value, bool) and bool not in accepted:
        return False
    return isinstance(value, accepted)


class SettingsValidator:
    """Check a populated settings dataclass against its field declarations.

    Each field is checked in order:

    * ``None`` is accepted only when the field declares a default;
    * ``bool`` / ``int`` / ``float`` / ``str`` / ``list[...]`` annotations
      must match the value's type (a ``bool`` is not an ``int``);
    * ``field(metadata={"choices": (...)})`` restricts the allowed values.

    Other annotations are not checked.
    """

    def validate(self, settings: Any) -> list[SettingIssue]:
        issues: list[SettingIssue] = []
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            if value is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    issues.append(SettingIssue(field.name, value, "required but None"))
                continue

            accepted = _accepted_types(field.type)
            if accepted is not None and not _has_type(value, accepted):
                issues.append(
                    SettingIssue(field.name, value, f"expected {_type_name(field.type)}")
                )
                continue

            choices = field.metadata.get("choices")
            if choices is not None and value not in choices:
                issues.append(
                    SettingIssue(field.name, value, f"expected one of {', '.join(map(str, choices))}")
                )
        return issues


__all__ = ["SettingIssue", "SettingsValidator"]
