"""
CLI commands for inspecting influence maps offline.

Usage:
    python -m bias_review.cli.influence_map render article.json
    python -m bias_review.cli.influence_map render article.json --html
    python -m bias_review.cli.influence_map categories
"""

import argparse
import json
import sys

from dotenv import load_dotenv

load_dotenv()


def _load_article(path: str):
    """Read and validate an Article JSON file (snake_case or camelCase)."""
    from pydantic import ValidationError

    from bias_review.schemas.influence_map import ArticleInfluenceMapRequest

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: could not read {path}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        return ArticleInfluenceMapRequest.model_validate(data)
    except ValidationError as e:
        print(f"Error: {path} is not a valid article: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_render(args):
    """Print the influence map for one article."""
    from bias_review.schemas.influence_map import InfluenceMapResponse
    from bias_review.services.influence_map import build_influence_map
    from bias_review.services.influence_map.renderer import render_influence_map

    article = _load_article(args.path)
    influence_map = build_influence_map(article.content, article.bias_explanation, article.behavioural_analysis)

    if args.html:
        print(render_influence_map(influence_map))
        return

    response = InfluenceMapResponse.from_influence_map(influence_map)
    print(json.dumps(response.model_dump(), indent=2, ensure_ascii=False))


def cmd_categories(args):
    """Print the section -> category table."""
    from bias_review.services.influence_map import FALLBACK_CATEGORY, SECTION_CATEGORIES

    print("\n=== Section Categories ===\n")
    for name, category in SECTION_CATEGORIES.items():
        print(f"  {name:<36} {category.label:<22} {category.underline}")
    print(f"\n  {'(unrecognized)':<36} {FALLBACK_CATEGORY.label:<22} {FALLBACK_CATEGORY.underline}")
    print()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Influence Map CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Segments, entries and legend as JSON
  python -m bias_review.cli.influence_map render article.json

  # Rendered HTML fragment
  python -m bias_review.cli.influence_map render article.json --html

  # Recognized section headers and their colours
  python -m bias_review.cli.influence_map categories
        """,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Build the influence map for an article JSON file")
    render_parser.add_argument("path", help="Path to an article JSON file")
    render_parser.add_argument("--html", action="store_true", help="Print the HTML fragment instead of JSON")
    render_parser.set_defaults(func=cmd_render)

    categories_parser = subparsers.add_parser("categories", help="List recognized section headers")
    categories_parser.set_defaults(func=cmd_categories)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
