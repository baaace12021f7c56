import html


def merge_spans(spans, limit: int):
    """(start, len) spans -> sorted, non-overlapping [start, end) runs within [0, limit)."""
    runs = []
    for s, length in sorted(spans):
        if length <= 0 or s < 0 or s >= limit:
            continue
        e = min(s + length, limit)
        if runs and s <= runs[-1][1]:
            runs[-1][1] = max(runs[-1][1], e)
        else:
            runs.append([s, e])
    return [(s, e) for s, e in runs]


def highlight_matches_html(text: str, spans: list[tuple[int, int]]):
    if not text:
        return "<em>No text</em>"
    out, pos = [], 0
    for s, e in merge_spans(spans, len(text)):
        out.append(html.escape(text[pos:s]))
        out.append("<mark>" + html.escape(text[s:e]) + "</mark>")
        pos = e
    out.append(html.escape(text[pos:]))
    return "<div style='white-space:pre-wrap;font-family:monospace'>" + "".join(out) + "</div>"
