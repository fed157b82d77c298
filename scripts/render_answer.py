#!/usr/bin/env python3
"""Script to render an answer file to HTML, the way the chat page shows it."""
import argparse
import json
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.services.markdown import render_answer_html
from core.services.markdown.renderer import THEMES


def load_answer(path: str, as_json: bool):
    """Read the answer; JSON files hold structured answers, anything else is text."""
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    if as_json or path.endswith(".json"):
        return json.loads(content)
    return content


def main():
    """Render the answer file and print the HTML fragment."""
    parser = argparse.ArgumentParser(description="Render a chat answer to HTML")
    parser.add_argument("path", help="Answer file (.json for structured answers, anything else is markdown text)")
    parser.add_argument("--theme", choices=THEMES, default="light", help="Color theme")
    parser.add_argument("--json", action="store_true", help="Parse the file as JSON regardless of extension")
    args = parser.parse_args()

    try:
        answer = load_answer(args.path, args.json)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Could not read answer from {args.path}: {e}", file=sys.stderr)
        sys.exit(1)

    print(render_answer_html(answer, theme=args.theme))


if __name__ == "__main__":
    main()
