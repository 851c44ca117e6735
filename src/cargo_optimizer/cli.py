from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from cargo_optimizer.api import build_response
from cargo_optimizer.config import configure_logging
from cargo_optimizer.io.schemas import PackingRequest, PackingResponse

logger = logging.getLogger(__name__)


def load_request(path: Path, preset: Optional[str] = None) -> PackingRequest:
    """Read a PackingRequest JSON file; `preset` replaces its container."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if preset is not None and isinstance(data, dict):
        data["container"] = {"preset": preset}
    return PackingRequest.model_validate(data)


def print_summary(response: PackingResponse) -> None:
    result = response.result
    summary = response.summary

    placed_ids = [p.unit_id for p in result.placed_items]
    unplaced_ids = [u.unit_id for u in result.unplaced_items]

    print("✅ Placed   :", placed_ids if placed_ids else "(none)")
    print("❌ Unplaced :", unplaced_ids if unplaced_ids else "(none)")

    print("\n📊 UTILIZATION:")
    print(f"  Used volume      : {summary.used_volume:.2f}")
    print(f"  Container volume : {summary.total_volume:.2f}")
    print(f"  Volume fill      : {summary.volume_utilization * 100:.1f}%")
    print(f"  Remaining weight : {summary.remaining_weight:,.1f}")
    print(f"  Free spaces      : {len(result.remaining_spaces)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Cargo Optimizer CLI")
    parser.add_argument("--input", required=True, help="Input packing request JSON file")
    parser.add_argument("--output", help="Output plan JSON file")
    parser.add_argument("--preset", help="Use this container preset instead of the request's container")
    parser.add_argument(
        "--render",
        action="store_true",
        help="Include scene coordinates and item colours in the output plan",
    )
    parser.add_argument("--log-level", help="Logging level (default from CARGO_LOG_LEVEL)")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        request = load_request(Path(args.input), preset=args.preset)
        response = build_response(request, include_render=args.render)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2)

    print_summary(response)

    if args.output:
        Path(args.output).write_text(response.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Plan written to {args.output}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
