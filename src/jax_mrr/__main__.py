"""Print a summary of an MRR assembly file."""

from __future__ import annotations

import argparse
import sys
from collections import Counter

from jax_mrr import config
from jax_mrr.io import MrrError
from jax_mrr.logs import configure_logging
from jax_mrr.session import AssemblySession


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="jax_mrr", description=__doc__)
    parser.add_argument("file", help=f"path to an .mrr file, or a name in {config.ASSEMBLY_DIR}")
    parser.add_argument("--filter", default="", help="only list parts whose name contains this text")
    parser.add_argument("--log", action="store_true", help=f"also write a daily log file to {config.LOG_DIR}")
    parser.add_argument("--log-dir", default=None, help="write the daily log file to this directory instead")
    parser.add_argument("--verbose", action="store_true", help="log at DEBUG level")
    args = parser.parse_args(argv)

    log_dir = args.log_dir or (config.LOG_DIR if args.log else None)
    configure_logging(log_dir, "DEBUG" if args.verbose else config.LOG_LEVEL)

    path = config.resolve_assembly_path(args.file)
    session = AssemblySession()
    try:
        loaded = session.import_file(path)
    except MrrError as exc:
        print(f"{args.file}: {exc.user_message}", file=sys.stderr)
        return 1

    assembly = loaded.assembly
    joint_types = Counter(joint.joint_type.name.lower() for joint in assembly.joints)
    print(f"assembly={loaded.metadata.name}")
    print(f"joints={len(assembly.joints)} " + " ".join(f"{k}={v}" for k, v in sorted(joint_types.items())))
    for part in assembly.find_parts(args.filter):
        triangles = sum(body.triangle_count for body in part.bodies)
        print(f"part={part.name!r} bodies={len(part.bodies)} triangles={triangles}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
