"""Parsing and merging of key=value options and string lists."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def parse_map(pairs: Iterable[str] | None, key_name: str) -> dict[str, str]:
    """Parse ``key=value`` strings into a dict, raising ``ValueError`` on bad input."""
    result: dict[str, str] = {}
    for pair in pairs or []:
        parts = pair.strip().split("=", 1)
        if len(parts) != 2:
            raise ValueError("label format is not correct, needs key=value")
        name, value = parts
        if not name:
            raise ValueError(f"empty {key_name} name: [{pair}]")
        if not value:
            raise ValueError(f"empty {key_name} value: [{pair}]")
        result[name] = value
    return result


def merge_map(
    base: Mapping[str, str] | None, overlay: Mapping[str, str] | None
) -> dict[str, str]:
    """Return a new dict of ``base`` with ``overlay`` applied on top."""
    return {**(base or {}), **(overlay or {})}


def merge_slice(values: Iterable[str] | None, overlay: Iterable[str] | None) -> list[str]:
    """Return ``overlay`` followed by the entries of ``values`` not already in it."""
    results = list(overlay or [])
    added = set(results)
    results.extend(value for value in values or [] if value not in added)
    return results


def compile_environment(
    envvar_opts: Iterable[str] | None,
    yaml_environment: Mapping[str, str] | None,
    file_environment: Mapping[str, str] | None,
) -> dict[str, str]:
    """Combine stack, file and command-line environment, later ones winning."""
    try:
        arguments = parse_map(envvar_opts, "env")
    except ValueError as exc:
        raise ValueError(f"error parsing envvars: {exc}") from exc
    return merge_map(merge_map(yaml_environment, file_environment), arguments)