import html as html_lib

from dictionary import Definition

SOURCE_MARKER = "<i>Source text follows</i>"


def esc(s: str) -> str:
    return html_lib.escape(s or "", quote=True)


def numbered_lines(items: list[str]) -> str:
    return "".join(f"{i}. {esc(item)}\n" for i, item in enumerate(items, 1))


def build_message(definition: Definition, with_source_marker: bool = False) -> str:
    """
    Telegram HTML message for a definition.

    Headword in bold, numbered translations, then an "Examples" block only
    when there are examples.
    """
    parts = [f"<b>{esc(definition.headword)}</b>\n\n", numbered_lines(definition.translations)]
    if definition.examples:
        parts.append("\n<b>Examples</b>:\n")
        parts.append(numbered_lines(definition.examples))
    if with_source_marker:
        parts.append(f"\n{SOURCE_MARKER}\n")
    return "".join(parts)


def build_source_message(text: str) -> str:
    return esc(text)
