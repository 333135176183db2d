"""Line-oriented command-line host.

Reads one host message per line (JSON), feeds each to a
:class:`~backpack_engine.host.CommandHandler`, and writes every outbound task
notification to stdout as one JSON line. Useful for replaying recorded host
sessions::

    python -m backpack_engine --max-slots 2 < session.jsonl

The exit status is 1 if any command was rejected or malformed; unknown
actions are ignored and do not count.
"""

import argparse
import logging
import sys
from typing import Callable, Iterable, List, Optional, TextIO

from backpack_engine.config import BackpackConfig, build_engine
from backpack_engine.host import CommandHandler
from backpack_engine.notifier import MessageNotifier

LOG_FORMAT = "[%(name)s] %(levelname)s %(message)s"


def configure_logging(debug: bool = False, stream: Optional[TextIO] = None) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=True,
    )


def run(lines: Iterable[str], config: BackpackConfig, send: Callable[[str], None]) -> int:
    """Process ``lines`` and return how many commands failed."""
    handler = CommandHandler(build_engine(config, MessageNotifier(send)))
    failures = 0
    for line in lines:
        line = line.strip()
        if not line:
            continue
        outcome = handler.handle_message(line)
        if outcome is not None and outcome.failure is not None:
            failures += 1
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Replay backpack host messages")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r", encoding="utf-8"),
                        default=sys.stdin, help="JSON-lines message file (default: stdin)")
    parser.add_argument("--max-slots", type=int, default=None,
                        help="Maximum number of distinct stacks")
    parser.add_argument("--task-prefix", default=None,
                        help="Prefix for outbound task names")
    parser.add_argument("--debug", action="store_true",
                        help="Log every engine operation to stderr")
    args = parser.parse_args(argv)

    try:
        config = BackpackConfig.from_mapping(
            {"max_slots": args.max_slots, "task_prefix": args.task_prefix, "debug": args.debug}
        )
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(config.debug)

    def send(message: str) -> None:
        print(message, flush=True)

    failures = run(args.input, config, send)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
