"""Boilerplate written by fix mode."""

README_TEMPLATE = """# {name}

A project.

## Usage

TODO: Add usage instructions

## License

MIT
"""

MIT_LICENSE_TEMPLATE = """MIT License

Copyright (c) {year} {author}

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

GITIGNORE_PATTERNS = [
    "node_modules/",
    ".env",
    ".env.local",
    "*.log",
    ".DS_Store",
    "dist/",
    "build/",
    "coverage/",
]

DEFAULT_AUTHOR = "Author"


def render_readme(name: str) -> str:
    return README_TEMPLATE.format(name=name)


def render_mit_license(year: int, author: str) -> str:
    return MIT_LICENSE_TEMPLATE.format(year=year, author=author or DEFAULT_AUTHOR)


def render_gitignore() -> str:
    return "\n".join(GITIGNORE_PATTERNS) + "\n"
