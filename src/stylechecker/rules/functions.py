"""Function length and lead-in comment rules."""

from __future__ import annotations

from stylechecker.analysis.declarations import is_function_header
from stylechecker.analysis.model import SourceModel
from stylechecker.analysis.text import (
    is_label_line,
    is_template_line,
    starts_with_open_brace,
)
from stylechecker.analysis.tokens import iter_tokens
from stylechecker.config import TYPE_KEYWORDS, Settings


def _is_header(model: SourceModel, index: int) -> bool:
    return not model.is_comment(index) and is_function_header(
        model.line(index), model.type_names
    )


def _previous_code_line(model: SourceModel, index: int) -> int | None:
    for i in range(index - 1, -1, -1):
        if model.is_code(i):
            return i
    return None


def is_inside_type_declaration(model: SourceModel, index: int) -> bool:
    """Is the block enclosing this line a class or struct body?

    Walks back to the nearest code line at a shallower scope, looking
    through access-specifier labels and a brace placed on its own line.
    """
    level = model.scope(index)
    for i in range(index - 1, -1, -1):
        if not model.is_code(i) or model.scope(i) >= level:
            continue
        if is_label_line(model.line(i)):
            level = model.scope(i)
            continue
        opener = i
        if starts_with_open_brace(model.line(i)):
            found = _previous_code_line(model, i)
            if found is None:
                return False
            opener = found
        return any(
            token.text in TYPE_KEYWORDS
            for token in iter_tokens(model.line(opener))
        )
    return False


def function_end(model: SourceModel, header: int) -> int:
    """Index of the first line after the function body.

    The body is the opening-brace line right after the header and
    every line deeper than the header. The closing brace sits at the
    header's own level.
    """
    level = model.scope(header)
    end = header + 1
    while end < len(model) and (
        model.scope(end) > level
        or (end == header + 1 and starts_with_open_brace(model.line(end)))
    ):
        end += 1
    return end


def check_function_length(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Flag functions longer than the limit for their context.

    Member functions defined inside a class body get the much
    smaller inline limit.
    """
    errors: list[int] = []
    i = 0
    while i < len(model):
        if not _is_header(model, i):
            i += 1
            continue
        limit = (
            settings.max_inline_function_length
            if is_inside_type_declaration(model, i)
            else settings.max_function_length
        )
        end = function_end(model, i)
        if end - i > limit:
            errors.append(i)
        i = end
    return errors


def has_lead_in_comment(model: SourceModel, index: int) -> bool:
    """Is there a comment just above, or above one blank line?

    Template declaration lines directly above the header are skipped.
    """
    i = index - 1
    while i >= 0 and not model.is_comment(i) and is_template_line(
        model.line(i)
    ):
        i -= 1
    if i < 0:
        return False
    if model.is_comment(i):
        return True
    return model.is_blank(i) and i >= 1 and model.is_comment(i - 1)


def check_function_lead_comments(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Top-level functions need a lead-in comment."""
    return [
        i
        for i in range(len(model))
        if model.scope(i) == 0
        and _is_header(model, i)
        and not has_lead_in_comment(model, i)
    ]
