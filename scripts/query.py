from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from cointalk.config import build_servers, load_settings
from cointalk.errors import ServerError
from cointalk.pool import Pool


def parse_param(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Query the wallet pool configured by WALLET_RPC_URLS.")
    parser.add_argument("method", help="RPC method name, e.g. getinfo.")
    parser.add_argument("params", nargs="*", help="Positional params; JSON literals are decoded.")
    parser.add_argument("--repeat", type=int, default=1, help="Number of round-robin queries to send.")
    args = parser.parse_args(argv)

    settings = load_settings()
    logging.basicConfig(level=settings.log_level.upper())

    servers = build_servers(settings)
    pool = Pool()
    for server in servers:
        pool.add(server)
    logging.info("pool ready with %d servers", pool.count())
    params = [parse_param(raw) for raw in args.params]
    try:
        for _ in range(args.repeat):
            result = pool.query(args.method, params)
            print(json.dumps(result, indent=2, sort_keys=True))
    except ServerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        for server in servers:
            server.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
