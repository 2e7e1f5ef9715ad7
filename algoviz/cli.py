import argparse
import json
import logging
import sys
from pathlib import Path

from . import config
from .dispatcher import (TREE_ALGORITHMS, algorithm_info, dispatch_and_generate,
                         generate_trace, list_algorithms, run)
from .errors import AlgoVizError, parse_int
from .player import COMPLETED, StepPlayer
from .trace import outcome_to_json, write_trace
from .validate import validate_paths
from .web import QUICK_QUESTIONS, ChatConfig, DSAChatClient
from .web.dsa_knowledge import GREETING

logger = logging.getLogger("algoviz")


def setup_logging(verbose=False, log_file=None):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def parse_values(text):
    """Parse '5, 3 8' style input into a list of integers within the accepted range."""
    parts = text.replace(",", " ").split()
    return [parse_int(p, config.VALUE_MIN, config.VALUE_MAX, name="value") for p in parts]


def default_values(algorithm_id):
    if algorithm_id in TREE_ALGORITHMS:
        return list(config.SAMPLE_TREE)
    if algorithm_id == "binary_search":
        return list(config.SAMPLE_SORTED_ARRAY)
    return list(config.SAMPLE_ARRAY)


def build_parameters(args):
    parameters = {}
    if getattr(args, "target", None) is not None:
        parameters["target"] = parse_int(args.target, config.VALUE_MIN, config.VALUE_MAX, name="target")
    if getattr(args, "max_iterations", None) is not None:
        parameters["max_iterations"] = args.max_iterations
    return parameters


def format_step(number, step):
    where = f" {list(step.indices)}" if step.indices else ""
    snapshot = ""
    if isinstance(step.snapshot, tuple):
        snapshot = f"  {list(step.snapshot)}"
    return f"{number:>4}. [{step.kind}]{where} {step.narration}{snapshot}"


# ----------------------------------------------------------------------
# Commands
# ----------------------------------------------------------------------

def cmd_list(args):
    for algorithm_id in list_algorithms():
        info = algorithm_info(algorithm_id)
        print(f"{algorithm_id:<16} {info['family']:<10} {info['name']}")
    return 0


def cmd_play(args):
    values = parse_values(args.values) if args.values else default_values(args.algorithm)
    sequence = run(values, args.algorithm, build_parameters(args))
    delay = args.delay if args.delay is not None else config.delay_for(args.algorithm)
    outcome = {}

    def on_step(step):
        print(format_step(player.delivered + 1, step), flush=True)

    def on_complete(result):
        outcome["result"] = result

    def on_error(exc):
        outcome["error"] = exc

    def on_cancel():
        print("Cancelled.")

    player = StepPlayer(sequence, on_step, delay_ms=delay, on_complete=on_complete,
                        on_error=on_error, on_cancel=on_cancel)
    player.start()
    try:
        while not player.join(0.1):
            pass
    except KeyboardInterrupt:
        player.cancel()
        player.join()
        return 130

    if "error" in outcome:
        raise outcome["error"]
    if player.state == COMPLETED:
        family = algorithm_info(args.algorithm)["family"]
        print(json.dumps(outcome_to_json(outcome["result"], family), ensure_ascii=False))
    return 0


def cmd_export(args):
    if args.intent:
        with open(args.intent, 'r', encoding='utf-8') as f:
            intent = json.load(f)
        trace = dispatch_and_generate(intent)
        algorithm_id = intent["algorithm_id"]
    else:
        if not args.algorithm:
            print("export needs an algorithm id or --intent", file=sys.stderr)
            return 2
        algorithm_id = args.algorithm
        values = parse_values(args.values) if args.values else default_values(algorithm_id)
        trace = generate_trace(values, algorithm_id, build_parameters(args))

    output_path = Path(args.output or f"{algorithm_id}_trace.json")
    write_trace(trace, output_path)
    print(f"Trace with {len(trace['deltas'])} steps saved to: {output_path}")
    return 0


def cmd_validate(args):
    success_count, failures = validate_paths(args.paths, show_progress=not args.quiet)
    print(f"Success: {success_count}, Failed: {len(failures)}")
    return 1 if failures or not success_count else 0


def cmd_ask(args):
    if not args.question:
        print(GREETING)
        for question in QUICK_QUESTIONS:
            print(f"  - {question}")
        return 0
    client = DSAChatClient(ChatConfig.from_env())
    reply = client.ask(" ".join(args.question))
    print(reply.text)
    return 0 if reply.source != "error" else 1


def build_parser():
    parser = argparse.ArgumentParser(prog="algoviz",
                                     description="Step-by-step data structure and algorithm visualizer engine")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List available algorithms")
    p.set_defaults(func=cmd_list)

    def add_run_arguments(p):
        p.add_argument("--values", help="Input values, e.g. '64,34,25,12'")
        p.add_argument("--target", help="Search target")
        p.add_argument("--max-iterations", type=int, help="AVL balancing iteration cap")

    p = sub.add_parser("play", help="Play an algorithm step by step")
    p.add_argument("algorithm", choices=list_algorithms())
    add_run_arguments(p)
    p.add_argument("--delay", type=int, help="Delay between steps in ms")
    p.set_defaults(func=cmd_play)

    p = sub.add_parser("export", help="Write a full step trace as JSON")
    p.add_argument("algorithm", nargs="?", choices=list_algorithms())
    add_run_arguments(p)
    p.add_argument("--intent", help="Path to intent JSON file")
    p.add_argument("-o", "--output", help="Output file")
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("validate", help="Validate trace JSON files or directories")
    p.add_argument("paths", nargs="+")
    p.add_argument("-q", "--quiet", action="store_true", help="No progress bar")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("ask", help="Ask the DSA assistant a question")
    p.add_argument("question", nargs="*", help="Leave empty for suggested questions")
    p.set_defaults(func=cmd_ask)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)
    try:
        return args.func(args)
    except AlgoVizError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error ({e.kind}): {e.message}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
