"""Command-line interface for one-off impact estimates."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from contextlib import ExitStack

from llm_impact.errors import EstimationError
from llm_impact.estimation.estimator import ImpactEstimator
from llm_impact.estimation.labeling import known_labels, resolve_label
from llm_impact.estimation.reporting import to_record
from llm_impact.logging_pipeline import structured_logging
from llm_impact.settings import get_settings

LOGGER = logging.getLogger(__name__)

_PACKAGE_LOGGER = "llm_impact"


def _build_parser(default_zone: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-impact",
        description="Estimate energy and environmental impacts of an LLM request.",
    )
    parser.add_argument("provider", nargs="?", help="Provider, e.g. 'openai'.")
    parser.add_argument("model", nargs="?", help="Model name or alias.")
    parser.add_argument(
        "--label",
        "-l",
        help=(
            "Application model label (e.g. 'claude-3.5-sonnet') used instead "
            "of PROVIDER and MODEL."
        ),
    )
    parser.add_argument(
        "--output-tokens", "-t", type=int, required=True, help="Generated tokens."
    )
    parser.add_argument(
        "--latency",
        "-s",
        type=float,
        required=True,
        help="Observed request latency in seconds.",
    )
    parser.add_argument(
        "--zone",
        "-z",
        default=default_zone,
        help=f"Electricity-mix zone code (default: {default_zone}).",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=("json", "record"),
        default="json",
        help="Nested JSON result or a flat usage-log record.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit structured JSON logs on stderr.",
    )
    return parser


def _resolve_target(args: argparse.Namespace) -> tuple[str, str, str]:
    """Return ``(provider, model, reported_label)`` from the parsed arguments."""

    if args.label and (args.provider or args.model):
        raise ValueError("Use either PROVIDER and MODEL or --label, not both.")
    if args.label:
        mapping = resolve_label(args.label)
        return mapping.provider, mapping.model, args.label
    if not args.provider or not args.model:
        raise ValueError(
            "Provide PROVIDER and MODEL, or --label. Known labels: "
            + ", ".join(known_labels())
        )
    return args.provider, args.model, args.model


def _validate_inputs(args: argparse.Namespace) -> None:
    if args.output_tokens < 0:
        raise ValueError("--output-tokens must be non-negative")
    if args.latency < 0:
        raise ValueError("--latency must be non-negative")


def main(argv: Sequence[str] | None = None) -> int:
    """Estimate a single request and print the result as JSON."""

    settings = get_settings()
    parser = _build_parser(settings.default_zone)

    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - controlled via tests
        exit_code = int(exc.code) if isinstance(exc.code, int) else 1
        return 0 if exit_code == 0 else 1

    with ExitStack() as stack:
        if args.log_json:
            stack.enter_context(
                structured_logging(
                    logging.getLogger(_PACKAGE_LOGGER),
                    level=settings.log_level_value,
                    context={
                        "provider": args.provider,
                        "model": args.model,
                        "label": args.label,
                        "zone": args.zone,
                        "output_tokens": args.output_tokens,
                        "latency": args.latency,
                    },
                )
            )
        else:
            logging.basicConfig(level=settings.log_level_value)
        return _run(args)


def _run(args: argparse.Namespace) -> int:
    try:
        _validate_inputs(args)
        provider, model_name, reported = _resolve_target(args)
        estimator = ImpactEstimator()
        result = estimator.estimate(
            provider, model_name, args.output_tokens, args.latency, args.zone
        )
    except (EstimationError, ValueError, OSError) as exc:
        LOGGER.debug("Estimate failed", extra={"error": type(exc).__name__})
        print(str(exc), file=sys.stderr)
        return 1

    estimation_model = estimator.resolve_model(provider, model_name).name
    LOGGER.info(
        "Estimated request impacts",
        extra={
            "estimation_model": estimation_model,
            "energy_kwh_max": result.energy.max,
            "gwp_kgco2eq_max": result.gwp.max,
        },
    )
    if args.format == "record":
        payload: object = to_record(
            result,
            provider=provider,
            model=reported,
            estimation_model=estimation_model,
            output_tokens=args.output_tokens,
            latency=args.latency,
            zone=args.zone,
        ).model_dump_json_ready()
    else:
        payload = result.to_dict()
    print(json.dumps(payload, separators=(",", ":")))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
