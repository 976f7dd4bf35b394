"""Markdown to HTML conversion for readings."""

import re

HEADING_CLASSES = {
    1: "font-serif text-4xl text-zinc-100 mt-6 mb-3",
    2: "font-serif text-3xl text-zinc-100 mt-6 mb-3",
    3: "font-serif text-2xl text-zinc-200 mt-5 mb-2",
    4: "font-serif text-xl text-zinc-200 mt-4 mb-2",
}


def _render_lists(text: str, pattern: str, tag: str, css: str) -> str:
    lines = text.split("\n")
    in_list = False
    result = []
    for line in lines:
        stripped = line.strip()
        if re.match(pattern, stripped):
            if not in_list:
                result.append(f'<{tag} class="{css}">')
                in_list = True
            item = re.sub(pattern, "", stripped)
            result.append(f"<li>{item}</li>")
        else:
            if in_list:
                result.append(f"</{tag}>")
                in_list = False
            result.append(line)
    if in_list:
        result.append(f"</{tag}>")
    return "\n".join(result)


def _render_heading(match: re.Match[str]) -> str:
    level = len(match.group(1))
    return f'<h{level} class="{HEADING_CLASSES[level]}">{match.group(2).strip()}</h{level}>'


def markdown_to_html(text: str) -> str:
    """Convert a reading in markdown to HTML.

    Supports: headings (# to ####), bold, italic, horizontal rules, lists.
    """
    # Escape HTML entities first
    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")

    # Headings (## text)
    text = re.sub(r"^[ \t]*(#{1,4})[ \t]+(.+?)[ \t]*#*[ \t]*$", _render_heading, text, flags=re.MULTILINE)

    # Horizontal rules (--- or ***)
    text = re.sub(r"^[ \t]*(?:-{3,}|\*{3,})[ \t]*$", '<hr class="my-6 border-white/10">', text, flags=re.MULTILINE)

    # Bold (**text** or __text__)
    text = re.sub(r"\*\*(.+?)\*\*", r'<strong class="text-zinc-100">\1</strong>', text)
    text = re.sub(r"__(.+?)__", r'<strong class="text-zinc-100">\1</strong>', text)

    # Italic (*text* or _text_), leaving list bullets alone
    text = re.sub(r"(?<![\w*])\*(?!\s)([^*\n]+?)\*", r"<em>\1</em>", text)
    text = re.sub(r"(?<!\w)_([^_\n]+)_(?!\w)", r"<em>\1</em>", text)

    text = _render_lists(text, r"^[-*]\s+", "ul", "list-disc list-inside my-2 space-y-1")
    text = _render_lists(text, r"^\d+\.\s+", "ol", "list-decimal list-inside my-2 space-y-1")

    # Line breaks, except right after block elements
    text = re.sub(r"(</h\d>|<hr[^>]*>|</?[uo]l[^>]*>|</li>)\n", r"\1", text)
    text = text.replace("\n", "<br>")

    return text
