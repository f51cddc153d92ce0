"""Static landing page markup.

Styles are inline (the CSP permits inline styles) and the page ships no
scripts, so the buttons are inert.
"""

from __future__ import annotations

TITLE = "Event Ticket Manager"
TAGLINE = "Create, sell, and manage event tickets with ease"
PRIMARY_ACTION = "Browse Events"
SECONDARY_ACTION = "Organizer Dashboard"
FOOTNOTE = "Powered by FastAPI + Starlette"

_STYLE = """
  body {
    margin: 0;
    min-height: 100vh;
    display: flex;
    align-items: center;
    justify-content: center;
    font-family: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif;
    background: linear-gradient(to bottom, #fafafa, #f4f4f5);
    color: #18181b;
  }
  @media (prefers-color-scheme: dark) {
    body { background: linear-gradient(to bottom, #18181b, #000); color: #fafafa; }
    .card { background: #09090b; border-color: #27272a; }
    .outline { color: #fafafa; border-color: #3f3f46; }
  }
  .card {
    width: 100%;
    max-width: 28rem;
    margin: 0 1rem;
    padding: 1.5rem;
    border: 1px solid #e4e4e7;
    border-radius: 0.75rem;
    background: #fff;
    box-shadow: 0 1px 2px rgba(0, 0, 0, 0.05);
  }
  h1 { margin: 0; font-size: 1.875rem; font-weight: 700; text-align: center; }
  .tagline { margin: 0.5rem 0 1.5rem; color: #71717a; text-align: center; }
  .actions { display: grid; gap: 0.5rem; }
  button {
    width: 100%;
    padding: 0.75rem 2rem;
    border-radius: 0.375rem;
    font-size: 1rem;
    border: 1px solid #18181b;
    background: #18181b;
    color: #fafafa;
  }
  button.outline { background: transparent; color: #18181b; border-color: #e4e4e7; }
  .footnote { margin: 1rem 0 0; font-size: 0.875rem; color: #71717a; text-align: center; }
"""


def render_landing_page() -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{TITLE}</title>
<style>{_STYLE}</style>
</head>
<body>
<main class="card">
  <h1>{TITLE}</h1>
  <p class="tagline">{TAGLINE}</p>
  <div class="actions">
    <button type="button">{PRIMARY_ACTION}</button>
    <button type="button" class="outline">{SECONDARY_ACTION}</button>
  </div>
  <p class="footnote">{FOOTNOTE}</p>
</main>
</body>
</html>
"""
