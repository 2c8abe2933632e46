"""Command-line front end for the client."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from .catalog import CompletionModels, EditModels
from .client import OAIClient
from .errors import EX_CONFIG, ConfigurationError
from .result import Result

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oaiclient",
        description="Query the OpenAI completions, edits, images and models endpoints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    oaiclient complete "Say this is a test" --max-tokens 7
    oaiclient edit "Fix the spelling mistakes" --input "What day of the wek is it?"
    oaiclient image "A cute baby sea otter" --size 256x256
    oaiclient models
    oaiclient --json models text-davinci-003

The API key is read from OPENAI_API_KEY or a .env file.
        """,
    )
    parser.add_argument("--env-file", help="Path to a .env file with OPENAI_API_KEY")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    parser.add_argument("-j", "--json", action="store_true", help="Output raw JSON")

    subparsers = parser.add_subparsers(dest="command", required=True)

    complete_parser = subparsers.add_parser("complete", help="Create a completion")
    complete_parser.add_argument("prompt", help="Prompt text")
    complete_parser.add_argument(
        "-m", "--model",
        default=CompletionModels.TEXT_DAVINCI_003.value,
        help="Model identifier (default: text-davinci-003)",
    )
    complete_parser.add_argument("--max-tokens", type=int, help="Maximum tokens to generate")
    complete_parser.add_argument("--temperature", type=float, help="Sampling temperature")

    edit_parser = subparsers.add_parser("edit", help="Create an edit")
    edit_parser.add_argument("instruction", help="How to edit the input")
    edit_parser.add_argument("-i", "--input", help="Text to edit")
    edit_parser.add_argument(
        "-m", "--model",
        default=EditModels.TEXT_DAVINCI_EDIT_001.value,
        help="Model identifier (default: text-davinci-edit-001)",
    )

    image_parser = subparsers.add_parser("image", help="Generate images from a prompt")
    image_parser.add_argument("prompt", help="Image description")
    image_parser.add_argument("-n", type=int, help="Number of images")
    image_parser.add_argument("--size", help="256x256, 512x512 or 1024x1024")

    models_parser = subparsers.add_parser("models", help="List models or show one")
    models_parser.add_argument("model_id", nargs="?", help="Model identifier")

    return parser


async def _run(args: argparse.Namespace, client: OAIClient) -> Result[Any, int]:
    if args.command == "complete":
        request = client.completions(args.model).prompt(args.prompt)
        if args.max_tokens is not None:
            request.max_tokens(args.max_tokens)
        if args.temperature is not None:
            request.temperature(args.temperature)
        return await request.complete()

    if args.command == "edit":
        request = client.edits(args.model, args.instruction)
        if args.input is not None:
            request.input(args.input)
        return await request.edit()

    if args.command == "image":
        request = client.images().generate(args.prompt)
        if args.n is not None:
            request.n(args.n)
        if args.size:
            request.size(args.size)
        return await request.done()

    if args.model_id:
        return await client.get_model(args.model_id)
    return await client.list_models()


def _print_models(models: list[Any]) -> None:
    table = Table(title="Models", show_header=True, header_style="bold cyan")
    table.add_column("ID")
    table.add_column("Owned by")
    for model in sorted(models, key=lambda m: m.id):
        table.add_row(model.id, model.owned_by or "")
    console.print(table)


def _print_value(command: str, value: Any) -> None:
    if command in ("complete", "edit"):
        console.print(value.text.strip(), markup=False)
        console.print(
            f"[dim]{value.usage.total_tokens} tokens "
            f"({value.usage.prompt_tokens} prompt, {value.usage.completion_tokens} completion)[/]"
        )
    elif command == "image":
        for item in value.data:
            console.print(item.url or "[dim]<base64 image>[/]")
    elif isinstance(value, list):
        _print_models(value)
    else:
        console.print(f"[bold]{value.id}[/] owned by {value.owned_by or 'unknown'}")


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, list):
        return [item.model_dump() for item in value]
    return value.model_dump()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        client = OAIClient(env_file=args.env_file)
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/] {e}")
        return EX_CONFIG

    result = asyncio.run(_run(args, client))

    if result.is_err():
        err_console.print(f"[red]Request failed with HTTP status {result.error}[/]")
        return 1

    if args.json:
        print(json.dumps(_to_jsonable(result.value), indent=2))
    else:
        _print_value(args.command, result.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
