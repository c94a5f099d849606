"""Compare the footprint of one response across models and zones.

Run after installing the package:

    python examples/estimate_demo.py --output-tokens 400 --latency 6.5

The script estimates the same request for a few catalog models in the
world-average zone and in a low-carbon grid, then prints the GWP bounds next
to their driving-distance equivalent.
"""

from __future__ import annotations

import argparse

from llm_impact import ImpactEstimator
from llm_impact.estimation.reporting import compare_gwp_equivalents

MODELS = (
    ("openai", "gpt-4o"),
    ("anthropic", "claude-3-5-haiku-latest"),
    ("huggingface_hub", "meta-llama/Meta-Llama-3.1-8B-Instruct"),
)
ZONES = ("WOR", "FRA")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--output-tokens", type=int, default=400)
    parser.add_argument("--latency", type=float, default=6.5)
    parser.add_argument(
        "--label",
        default="gpt-4o-mini",
        help="Application label estimated in addition to the catalog models",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    estimator = ImpactEstimator()

    for zone in ZONES:
        print(f"zone {zone}")
        for provider, model in MODELS:
            result = estimator.estimate(
                provider, model, args.output_tokens, args.latency, zone=zone
            )
            km = compare_gwp_equivalents(result.gwp)
            print(
                f"  {provider}/{model}: gwp {result.gwp.min:.6f}-{result.gwp.max:.6f} kgCO2eq"
                f" ({km['min']['equivalent_km_driven']}-{km['max']['equivalent_km_driven']} km)"
            )
        labeled = estimator.estimate_for_label(
            args.label, args.output_tokens, args.latency, zone=zone
        )
        print(f"  label {args.label}: energy {labeled.energy.min:.6f}-{labeled.energy.max:.6f} kWh")


if __name__ == "__main__":
    main()
