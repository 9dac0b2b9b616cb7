"""
Default file content for newly provisioned projects and themes.

All values are bytes so they can be handed to ``write_files`` as-is.
"""

from __future__ import annotations

import textwrap

from verless.core.config.constants import DEFAULT_THEME, OUTPUT_DIR

DEFAULT_CONFIG: bytes = textwrap.dedent(f"""\
    version: 1
    site:
      meta:
        title: My verless site
        subtitle: Built with verless.
        description: A static site generated by verless.
        author: ""
        base: http://localhost:8080
      nav:
        items:
          - label: Home
            target: /
      footer:
        items:
          - label: verless
            target: https://github.com/verless/verless
    plugins: []
    theme: {DEFAULT_THEME}
    build:
      overwrite: false
""").encode("utf-8")

DEFAULT_GITIGNORE: bytes = f"{OUTPUT_DIR}/\n".encode("utf-8")

DEFAULT_TEMPLATE: bytes = textwrap.dedent("""\
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>{{ .Meta.Title }}</title>
        <link rel="stylesheet" href="/css/style.css">
    </head>
    <body>
        <header>
            <h1>{{ .Meta.Title }}</h1>
            <p>{{ .Meta.Subtitle }}</p>
        </header>
        <main>
            {{ range $page := .Pages }}
            <article>
                <h2><a href="{{ $page.Href }}">{{ $page.Title }}</a></h2>
                <p>{{ $page.Description }}</p>
            </article>
            {{ end }}
        </main>
    </body>
    </html>
""").encode("utf-8")

DEFAULT_CSS: bytes = textwrap.dedent("""\
    body {
        margin: 0 auto;
        max-width: 720px;
        padding: 0 1rem;
        font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif;
        line-height: 1.6;
        color: #24292e;
    }

    header {
        padding: 2rem 0;
        border-bottom: 1px solid #e1e4e8;
    }

    article {
        padding: 1rem 0;
    }

    a {
        color: #0366d6;
        text-decoration: none;
    }
""").encode("utf-8")

DEFAULT_THEME_CONFIG: bytes = textwrap.dedent("""\
    version: 1
    compat: ">= 0.1"
    build:
      before: []
""").encode("utf-8")
