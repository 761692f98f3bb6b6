from __future__ import annotations

"""
Эти функции не зависят от Qt и могут использоваться и
тестироваться отдельно от GUI. CodeEditor и планировщики
вставки/вырезания делегируют им всю работу с отступами.
"""

import re
from typing import Final, List, Sequence

DEFAULT_INDENT: Final[str] = "    "
BLOCK_OPENERS: Final[str] = ":({["
COMMENT_MARKER: Final[str] = "#"

_TRANSCRIPT_START = re.compile(r"^(?:>>>(?: |$)|\.\.\. )")
_PROMPT = re.compile(r"^(?:>>>|\.\.\.)(?: |$)")


def resolve_indent_unit(tab_size: int, insert_spaces: bool) -> str:
    """Единица отступа из настроек: tab_size пробелов или один таб."""
    if insert_spaces:
        return " " * max(1, int(tab_size))
    return "\t"


def leading_whitespace(line: str) -> str:
    return line[: indent_length(line)]


def indent_length(line: str) -> int:
    """Количество ведущих пробелов и табов."""
    return len(line) - len(line.lstrip(" \t"))


def code_part(line: str) -> str:
    """Вернуть часть строки до комментария, без хвостовых пробелов."""
    return line.split(COMMENT_MARKER, 1)[0].rstrip()


def is_comment(line: str) -> bool:
    return line.strip().startswith(COMMENT_MARKER)


def is_block_header(line: str) -> bool:
    """Строка открывает вложенный блок: заканчивается на ':', '(', '{' или '['."""
    if is_comment(line):
        return False
    code = code_part(line)
    return bool(code) and code[-1] in BLOCK_OPENERS


def detect_line_separator(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def strip_repl_prompts(text: str, sep: str = "\n") -> str:
    """Убрать приглашения интерпретатора (>>> и ...) из вставленного сеанса.

    Срабатывает только если первая непустая строка начинается с приглашения;
    тогда приглашение снимается с каждой строки, где оно есть.
    """
    lines = text.split(sep)
    first = next((line for line in lines if line.strip()), "")
    if not _TRANSCRIPT_START.match(first.lstrip()):
        return text
    stripped = []
    for line in lines:
        body = line.lstrip(" \t")
        match = _PROMPT.match(body)
        stripped.append(body[match.end():] if match else line)
    return sep.join(stripped)


def guess_source_indent_unit(lines: Sequence[str], indent_unit: str = DEFAULT_INDENT) -> str:
    """Угадать единицу отступа, которой пользовался источник вставки.

    Смотрим строки после первой, начинающиеся с пробельного символа.
    Если таких нет, нормализовать нечего. Табы распознаются как таб,
    иначе берётся минимальная длина ведущих пробелов (1..4), а всё
    остальное считается четырьмя пробелами.
    """
    indented = [line for line in lines[1:] if line.strip() and line[:1] in (" ", "\t")]
    if not indented:
        return indent_unit
    if all(line.startswith("\t") for line in indented):
        return "\t"
    min_spaces = min(len(line) - len(line.lstrip(" ")) for line in indented)
    if 1 <= min_spaces <= 4:
        return " " * min_spaces
    return DEFAULT_INDENT


def normalize_indent_unit(lines: Sequence[str], source_unit: str, indent_unit: str) -> List[str]:
    """Переписать ведущие отступы из source_unit в indent_unit."""
    if source_unit == indent_unit:
        return list(lines)
    result = []
    for line in lines:
        indent = leading_whitespace(line)
        result.append(indent.replace(source_unit, indent_unit) + line[len(indent):])
    return result


def has_lost_indentation(lines: Sequence[str]) -> bool:
    """True, если ни одна непустая строка не начинается с пробельного символа."""
    return all(indent_length(line) == 0 for line in lines if line.strip())


def _reference_indent(first_line: str, second_indent: int, indent_unit: str) -> int:
    # First line copied from inside a deeper block than its siblings.
    first_indent = indent_length(first_line)
    if (
        first_indent % len(indent_unit) == 0
        and first_indent > second_indent
        and not code_part(first_line).endswith(":")
    ):
        return first_indent + (len(indent_unit) if is_block_header(first_line) else 0)
    return second_indent


def reindent_lines(
    lines: Sequence[str],
    base_level: int,
    indent_unit: str = DEFAULT_INDENT,
    lost_indent: bool = False,
) -> List[str]:
    """Перестроить отступы блока строк относительно base_level.

    Первая строка всегда ставится ровно на base_level. Если отступы
    потеряны (lost_indent), структура восстанавливается только по
    строкам-заголовкам блоков: после каждого заголовка уровень растёт
    на единицу. Иначе уровни считаются по разнице исходных отступов
    соседних строк. Пустые строки остаются пустыми.
    """
    if not lines:
        return []
    unit_len = len(indent_unit)
    first = lines[0]
    relative = 1 if is_block_header(first) else 0
    result = [indent_unit * max(0, base_level) + first.strip()]

    if lost_indent:
        for line in lines[1:]:
            content = line.strip()
            if not content:
                result.append("")
                continue
            result.append(indent_unit * max(0, base_level + relative) + content)
            if is_block_header(content):
                relative += 1
        return result

    reference = None
    drift = 0
    for line in lines[1:]:
        content = line.strip()
        if not content:
            result.append("")
            continue
        indent = indent_length(line)
        if reference is None:
            reference = _reference_indent(first, indent, indent_unit)
        drift += indent - reference
        level = base_level + relative + drift // unit_len
        result.append(indent_unit * max(0, level) + content)
        reference = indent
    return result


def compute_newline_with_indentation(current_line_prefix: str, indent_unit: str = DEFAULT_INDENT) -> str:
    """Вернуть строку для вставки при автоотступе после Enter.
    current_line_prefix — текст от начала строки до курсора.
    """
    indent_text = leading_whitespace(current_line_prefix)
    extra_indent = indent_unit if is_block_header(current_line_prefix) else ""
    return "\n" + indent_text + extra_indent


def unindent_line(line: str, indent_unit: str = DEFAULT_INDENT) -> str:
    """Вернуть строку без одного уровня indent_unit в начале (если он есть)."""
    if line.startswith(indent_unit):
        return line[len(indent_unit) :]
    return line
