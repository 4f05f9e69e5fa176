# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Forbidden-identifier pattern parser.

Turns a raw specification into a normalized ``Pattern``. Both expressions
are compiled and every ignore glob is compiled here, at parse time, so a
constructed ``Pattern`` is always usable.

Accepted shapes, in the order they are tried by ``parse_pattern``:

1. Structured record, decoded with ``yaml.safe_load``::

       {p: ^fmt\\.Println$, msg: use logging, ignore: ["**", "!**/main.py"]}
       p: ^os\\.getenv$

2. Bare expression with an inline message group::

       fmt\\.Println(# Please don't use this!)?

3. Bare expression without a message.

A mapping that is not a valid record falls back to the bare shapes, so
``Foo: bar`` is the expression ``Foo: bar``. Only when both attempts fail is
the input rejected as ``INVALID_SHAPE``.

Usage:
    >>> pattern = parse_pattern("fmt\\\\.Println(# Please don't use this!)?")
    >>> pattern.message
    "Please don't use this!"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

import yaml
from pydantic import ValidationError

from omnibase_forbid.enums import EnumPatternErrorKind
from omnibase_forbid.errors import (
    GlobSyntaxError,
    ModelForbidErrorContext,
    PatternParseError,
)
from omnibase_forbid.models.model_pattern import Pattern
from omnibase_forbid.models.model_pattern_record import ModelPatternRecord
from omnibase_forbid.validation.pattern_comment import extract_comment

logger = logging.getLogger(__name__)

PatternEntry = str | Pattern | Mapping[str, object] | ModelPatternRecord


def parse_pattern(raw: str) -> Pattern:
    """Parse a raw specification string into a Pattern.

    Args:
        raw: Specification as supplied by the user (command line argument).

    Returns:
        The normalized pattern. ``source_text`` is ``raw`` verbatim for a
        bare expression and the ``p`` expression for a record, whichever
        way the record was supplied.

    Raises:
        PatternParseError: ``INVALID_EXPRESSION`` if an expression does not
            compile, ``INVALID_GLOB`` for a malformed ignore glob,
            ``INVALID_SHAPE`` if ``raw`` is neither a valid record nor a
            valid bare expression.
    """
    record_error: str | None = None
    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError:
        document = None

    if isinstance(document, Mapping):
        try:
            record = ModelPatternRecord.model_validate(document)
        except ValidationError as e:
            record_error = _format_validation_error(e)
            logger.debug(
                "Pattern mapping is not a record, trying bare expression",
                extra={"source_text": raw, "error": record_error},
            )
        else:
            return _pattern_from_record(record, source_text=record.p)

    try:
        return _pattern_from_expression(raw)
    except PatternParseError as e:
        if record_error is None:
            raise
        raise PatternParseError(
            _neither_message(e.message, record_error),
            kind=EnumPatternErrorKind.INVALID_SHAPE,
            source_text=raw,
            context=_context(raw),
        ) from e


def parse_pattern_value(value: object) -> Pattern:
    """Parse an already decoded configuration entry.

    A string is a bare expression (with an optional message group); it is
    not decoded again. A mapping must be a valid record.

    Raises:
        PatternParseError: ``INVALID_SHAPE`` for a value that is neither a
            string nor a valid record, otherwise as ``parse_pattern``.
    """
    if isinstance(value, Pattern):
        return value
    if isinstance(value, str):
        return _pattern_from_expression(value)
    if isinstance(value, ModelPatternRecord):
        return _pattern_from_record(value, source_text=value.p)
    if isinstance(value, Mapping):
        try:
            record = ModelPatternRecord.model_validate(value)
        except ValidationError as e:
            raise PatternParseError(
                _neither_message(
                    "value is a mapping, not a string",
                    _format_validation_error(e),
                ),
                kind=EnumPatternErrorKind.INVALID_SHAPE,
                source_text=repr(dict(value)),
                context=_context(repr(dict(value))),
            ) from e
        return _pattern_from_record(record, source_text=record.p)
    raise PatternParseError(
        _neither_message(
            f"value is a {type(value).__name__}, not a string",
            f"value is a {type(value).__name__}, not a mapping",
        ),
        kind=EnumPatternErrorKind.INVALID_SHAPE,
        source_text=repr(value),
        context=_context(repr(value)),
    )


def parse_patterns(entries: Iterable[PatternEntry]) -> tuple[Pattern, ...]:
    """Parse several entries, stopping at the first failure.

    Strings are parsed with ``parse_pattern``; mappings and records with
    ``parse_pattern_value``; Pattern values are kept as they are.
    """
    patterns: list[Pattern] = []
    for entry in entries:
        if isinstance(entry, str):
            patterns.append(parse_pattern(entry))
        else:
            patterns.append(parse_pattern_value(entry))
    return tuple(patterns)


def _pattern_from_expression(expression: str) -> Pattern:
    matcher = _compile(expression, "source code", expression)
    return _build(
        source_text=expression,
        matcher=matcher,
        message=extract_comment(expression),
    )


def _pattern_from_record(record: ModelPatternRecord, source_text: str) -> Pattern:
    matcher = _compile(record.p, "source code", source_text)
    package_qualifier = (
        _compile(record.pkg, "package", source_text) if record.pkg else None
    )
    return _build(
        source_text=source_text,
        matcher=matcher,
        message=record.msg or extract_comment(record.p),
        package_qualifier=package_qualifier,
        ignore_globs=record.ignore,
    )


def _build(
    source_text: str,
    matcher: re.Pattern[str],
    message: str,
    package_qualifier: re.Pattern[str] | None = None,
    ignore_globs: tuple[str, ...] = (),
) -> Pattern:
    try:
        return Pattern(
            source_text=source_text,
            matcher=matcher,
            message=message,
            package_qualifier=package_qualifier,
            ignore_globs=tuple(ignore_globs),
        )
    except GlobSyntaxError as e:
        raise PatternParseError(
            f"invalid ignore glob in pattern `{source_text}`: {e.message}",
            kind=EnumPatternErrorKind.INVALID_GLOB,
            source_text=source_text,
            context=_context(source_text),
        ) from e


def _compile(expression: str, what: str, source_text: str) -> re.Pattern[str]:
    try:
        return re.compile(expression)
    except re.error as e:
        raise PatternParseError(
            f"unable to compile {what} pattern `{expression}`: {e}",
            kind=EnumPatternErrorKind.INVALID_EXPRESSION,
            source_text=source_text,
            context=_context(source_text),
        ) from e


def _neither_message(expression_error: str, record_error: str) -> str:
    return (
        f"pattern is neither a regular expression string ({expression_error}) "
        f"nor a Pattern struct ({record_error})"
    )


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


def _context(source_text: str) -> ModelForbidErrorContext:
    return ModelForbidErrorContext(operation="parse_pattern", target_name=source_text)


__all__: list[str] = [
    "PatternEntry",
    "parse_pattern",
    "parse_pattern_value",
    "parse_patterns",
]
