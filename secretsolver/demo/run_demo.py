#!/usr/bin/env python3
"""secretsolver demo.

Usage:
    python -m secretsolver.demo.run_demo

Solves two sample share documents and prints the trace of each solve.
If ``SECRETSOLVER_URL`` is set (e.g. ``http://localhost:8000``), the
documents are posted to a running service instead of solved in-process.
"""

from __future__ import annotations

import json
import os

import httpx

from secretsolver.crypto import radix
from secretsolver.solver import solve
from secretsolver.trace import Trace

SERVICE_URL = os.environ.get("SECRETSOLVER_URL", "")

# ---------- sample documents ---------------------------------------------
SAMPLE_SMALL = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}

SAMPLE_LARGE = {
    "keys": {"n": 10, "k": 7},
    "1": {"base": "6", "value": "13444211440455345511"},
    "2": {"base": "15", "value": "aed7015a346d635"},
    "3": {"base": "15", "value": "6aeeb69631c227c"},
    "4": {"base": "16", "value": "e1b5e05623d881f"},
    "5": {"base": "8", "value": "316034514573652620673"},
    "6": {"base": "3", "value": "2122212201122002221120200210011020220200"},
    "7": {"base": "3", "value": "20120221122211000100210021102001201112121"},
    "8": {"base": "6", "value": "20220554335330240002224253"},
    "9": {"base": "12", "value": "45153788322a1255483"},
    "10": {"base": "7", "value": "1101613130313526312514143"},
}

SAMPLES = [("small (n=4, k=3)", SAMPLE_SMALL), ("large (n=10, k=7)", SAMPLE_LARGE)]


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def run_local() -> None:
    for name, doc in SAMPLES:
        banner(f"Solve {name}")
        trace = Trace()
        result = solve(doc, trace)
        for line in trace.render():
            print(f"   {line}")
        status = "exact" if result.exact else "SUSPECT (non-integer)"
        print(f"\n   Secret: {radix.to_text(result.secret)}  [{status}]")
        sign = "-" if result.secret < 0 else ""
        print(f"   Secret (base 36): {sign}{radix.encode(abs(result.secret), 36)}")


def run_remote(base_url: str) -> None:
    with httpx.Client(base_url=base_url, timeout=15.0) as client:
        for name, doc in SAMPLES:
            banner(f"Solve {name} via {base_url}")
            resp = client.post("/solve", params={"trace": "true"}, content=json.dumps(doc))
            if resp.status_code != 200:
                print(f"   HTTP {resp.status_code}: {resp.text}")
                continue
            body = resp.json()
            for entry in body.get("trace", []):
                print(f"   [{entry['event']}] {entry['data']}")
            print(f"\n   Secret: {body['secret']}  exact={body['exact']}")


def main() -> None:
    if SERVICE_URL:
        run_remote(SERVICE_URL)
    else:
        run_local()
    banner("DEMO COMPLETE")


if __name__ == "__main__":
    main()
