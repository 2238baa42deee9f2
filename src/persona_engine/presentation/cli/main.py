"""
CLI entry point

Offline access to extraction and persona generation, plus a `serve` command
that starts the HTTP API.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from persona_engine import __version__
from persona_engine.application import PersonaEngineService, extraction_payload, failure_payload
from persona_engine.config import CONFIG_ENV_VAR, load_config
from persona_engine.infrastructure.logging import configure_logging
from persona_engine.memory import (
    SAMPLE_CONVERSATIONS,
    get_sample,
    memory_stats,
    parse_transcript_bytes,
    validate_messages,
)
from persona_engine.personas import PERSONA_IDS, get_all_personas


def create_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser"""
    parser = argparse.ArgumentParser(
        prog="persona-engine",
        description="Persona Engine - memory extraction and persona replies",
    )
    parser.add_argument("--config", "-c", help="YAML config file")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", "-v", action="store_true", help="show version")

    subparsers = parser.add_subparsers(dest="command", help="available commands")

    extract_parser = subparsers.add_parser("extract", help="extract memories from a transcript")
    extract_parser.add_argument("--input", "-i", help="transcript file (default: stdin)")

    generate_parser = subparsers.add_parser("generate", help="answer a question in persona voice")
    generate_parser.add_argument("--memories", "-m", required=True, help="memory profile JSON file")
    generate_parser.add_argument("--query", "-q", required=True, help="question to answer")
    target = generate_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--persona", "-p", choices=PERSONA_IDS, help="single persona")
    target.add_argument("--all", action="store_true", help="all personas")

    subparsers.add_parser("personas", help="list personas")

    sample_parser = subparsers.add_parser("sample", help="print a bundled sample transcript")
    sample_parser.add_argument(
        "--name", "-n", default=SAMPLE_CONVERSATIONS[0].id, help="sample id"
    )

    serve_parser = subparsers.add_parser("serve", help="run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def _emit(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _read_input(path: Optional[str]) -> bytes:
    if path:
        return Path(path).read_bytes()
    return sys.stdin.buffer.read()


def _load_memories(path: str) -> Any:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    # accept the output of `extract` as well as a bare profile
    if isinstance(data, dict) and "memories" in data:
        return data["memories"]
    return data


def _cmd_extract(service: PersonaEngineService, parsed: argparse.Namespace) -> int:
    messages = parse_transcript_bytes(_read_input(parsed.input))
    warnings = validate_messages(messages).warnings

    result = service.extract_messages(messages)
    if not result.is_ok():
        _emit({**failure_payload(result.error), "warnings": warnings})
        return 1

    profile = result.unwrap()
    _emit(
        {
            **extraction_payload(profile),
            "warnings": warnings,
            "stats": memory_stats(profile).to_payload(),
        }
    )
    return 0


def _cmd_generate(service: PersonaEngineService, parsed: argparse.Namespace) -> int:
    payload: Dict[str, Any] = {
        "query": parsed.query,
        "memories": _load_memories(parsed.memories),
    }
    if parsed.all:
        payload["generateAll"] = True
    else:
        payload["personality"] = parsed.persona

    result = asyncio.run(service.generate(payload))
    if not result.is_ok():
        _emit(failure_payload(result.error))
        return 1
    _emit(result.unwrap().to_payload())
    return 0


def _cmd_personas() -> int:
    for persona in get_all_personas():
        print(f"{persona.icon} {persona.id:<13} {persona.name} (temperature {persona.temperature})")
        print(f"    {persona.description}")
        print(f"    {', '.join(persona.characteristic_tags)}")
    return 0


def _cmd_sample(parsed: argparse.Namespace) -> int:
    sample = get_sample(parsed.name)
    if sample is None:
        known = ", ".join(s.id for s in SAMPLE_CONVERSATIONS)
        print(f"Error: unknown sample '{parsed.name}' (available: {known})", file=sys.stderr)
        return 1
    print(sample.transcript)
    return 0


def _cmd_serve(parsed: argparse.Namespace) -> int:
    import uvicorn

    # the app loads its own config at startup
    if parsed.config:
        os.environ[CONFIG_ENV_VAR] = parsed.config
    uvicorn.run("persona_engine.api.main:app", host=parsed.host, port=parsed.port)
    return 0


def run_cli(args: Optional[list] = None, service: Optional[PersonaEngineService] = None) -> int:
    """
    Run the CLI

    Args:
        args: command line arguments (defaults to sys.argv)
        service: pre-built service, mainly for tests

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f"persona-engine v{__version__}")
        return 0

    if not parsed.command:
        parser.print_help()
        return 0

    if parsed.command == "personas":
        return _cmd_personas()
    if parsed.command == "sample":
        return _cmd_sample(parsed)

    try:
        config = load_config(parsed.config)
        configure_logging(config.logging, verbose=parsed.verbose)

        if parsed.command == "serve":
            return _cmd_serve(parsed)

        service = service or PersonaEngineService.from_config(config)
        if parsed.command == "extract":
            return _cmd_extract(service, parsed)
        if parsed.command == "generate":
            return _cmd_generate(service, parsed)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 2


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
