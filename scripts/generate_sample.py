#!/usr/bin/env python
"""Generate a handful of sample artifacts in parallel through the configured writer."""

from __future__ import annotations

import argparse
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Tuple

from artifact_writer.utils.config import create_writer, load_writer_config


def render_artifacts(out_dir: Path, count: int) -> List[Tuple[Path, bytes]]:
    artifacts: List[Tuple[Path, bytes]] = []
    for i in range(count):
        body = f"// generated module {i}\nexport const value{i} = {i};\n"
        artifacts.append((out_dir / f"module_{i}.js", body.encode("utf-8")))
    return artifacts


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default=None)
    parser.add_argument("--out-dir", default="examples/generated")
    parser.add_argument("--count", type=int, default=20)
    parser.add_argument("--stale", nargs="*", default=[], help="Artifacts to remove")
    parser.add_argument("--workers", type=int, default=4)
    args = parser.parse_args()

    writer = create_writer(load_writer_config(args.config))
    artifacts = render_artifacts(Path(args.out_dir), args.count)
    with ThreadPoolExecutor(max_workers=args.workers) as pool:
        futures = [pool.submit(writer.write_if_changed, path, content) for path, content in artifacts]
        futures += [pool.submit(writer.remove, path) for path in args.stale]
        for future in futures:
            future.result()
    writer.finalize()
    print(f"Processed {len(artifacts)} artifacts into {args.out_dir}")


if __name__ == "__main__":
    main()
