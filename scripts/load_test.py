#!/usr/bin/env python3
# =============================================================================
# Load Testing Script
# =============================================================================
"""
Load test for the Payload API.

Sends a steady stream of payloads split across the three routes:
- /api/payload (unversioned, served by v1)
- /api/v1/payload
- /api/v2/payload with random source and priority

A small share of requests carries blank content to exercise the 400 path.

Usage:
    python scripts/load_test.py --url http://localhost:8000 --rpm 600 --duration 60
"""

import argparse
import asyncio
import random
import string
import time
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

import httpx


# =============================================================================
# Configuration
# =============================================================================

ROUTES = ["/api/payload", "/api/v1/payload", "/api/v2/payload"]
SOURCES = ["mobile-app", "web-portal", "batch-import", None]
PRIORITIES = ["low", "normal", "high", None]
BLANK_RATIO = 0.05


@dataclass
class RequestResult:
    """Outcome of a single request."""
    route: str
    status_code: int
    latency_ms: float
    expected_status: int
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code == self.expected_status


# =============================================================================
# Test Data Generation
# =============================================================================

def generate_content() -> str:
    """Random printable text, 10 to 400 characters."""
    length = random.randint(10, 400)
    return "".join(random.choices(string.ascii_letters + string.digits + " ", k=length))


def generate_body(route: str, blank: bool) -> dict:
    """Build a request body for the given route."""
    body = {"content": random.choice(["", "   "]) if blank else generate_content()}

    if route.startswith("/api/v2"):
        source = random.choice(SOURCES)
        priority = random.choice(PRIORITIES)
        if source is not None:
            body["source"] = source
        if priority is not None:
            body["priority"] = priority

    return body


# =============================================================================
# Load Test Runner
# =============================================================================

async def send_request(client: httpx.AsyncClient, url: str, route: str) -> RequestResult:
    """Send one payload and time it."""
    blank = random.random() < BLANK_RATIO
    expected = 400 if blank else 200

    try:
        start = time.perf_counter()
        response = await client.post(f"{url}{route}", json=generate_body(route, blank))
        latency = (time.perf_counter() - start) * 1000
    except httpx.HTTPError as e:
        return RequestResult(route, 0, 0.0, expected, error=f"{type(e).__name__}: {e}")

    return RequestResult(route, response.status_code, latency, expected)


async def run_load_test(url: str, rpm: int, duration_seconds: int) -> List[RequestResult]:
    """Issue requests at a fixed rate until the duration elapses."""
    results: List[RequestResult] = []
    interval = 60.0 / rpm

    print(f"\n{'='*60}")
    print("Payload API Load Test")
    print(f"{'='*60}")
    print(f"Target URL: {url}")
    print(f"Target RPM: {rpm}")
    print(f"Duration: {duration_seconds} seconds")
    print(f"{'='*60}\n")

    async with httpx.AsyncClient(timeout=30.0) as client:
        start_time = time.perf_counter()

        while (time.perf_counter() - start_time) < duration_seconds:
            route = ROUTES[len(results) % len(ROUTES)]
            results.append(await send_request(client, url, route))

            if len(results) % 100 == 0:
                elapsed = time.perf_counter() - start_time
                ok_rate = sum(1 for r in results if r.ok) / len(results) * 100
                print(f"  Sent {len(results)} requests | "
                      f"Actual RPM: {len(results) / elapsed * 60:.0f} | "
                      f"As expected: {ok_rate:.1f}%")

            await asyncio.sleep(interval)

    return results


def percentile(values: List[float], fraction: float) -> float:
    if not values:
        return 0.0
    ordered = sorted(values)
    return ordered[min(int(len(ordered) * fraction), len(ordered) - 1)]


def print_results(results: List[RequestResult]) -> None:
    """Print test results summary."""
    total = len(results)
    if not total:
        print("No requests sent.")
        return

    as_expected = sum(1 for r in results if r.ok)
    latencies = [r.latency_ms for r in results if r.status_code]

    print(f"\n{'='*60}")
    print("RESULTS SUMMARY")
    print(f"{'='*60}")
    print(f"\nTotal Requests:     {total}")
    print(f"As expected:        {as_expected} ({as_expected/total*100:.1f}%)")
    print(f"\nLatency (ms):")
    print(f"  p50:              {percentile(latencies, 0.50):.1f}")
    print(f"  p95:              {percentile(latencies, 0.95):.1f}")
    print(f"  p99:              {percentile(latencies, 0.99):.1f}")

    print(f"\nStatus by route:")
    for (route, code), count in sorted(Counter((r.route, r.status_code) for r in results).items()):
        print(f"  {route} {code}: {count}")

    errors = Counter(r.error for r in results if r.error)
    if errors:
        print(f"\nErrors ({sum(errors.values())}):")
        for error, count in errors.items():
            print(f"  {error}: {count}")

    print(f"\n{'='*60}")
    if as_expected / total >= 0.99:
        print("PASS: >99% of responses as expected")
    else:
        print("FAIL: <99% of responses as expected")
    print(f"{'='*60}\n")


# =============================================================================
# Main
# =============================================================================

def main():
    parser = argparse.ArgumentParser(description="Load test for the Payload API")
    parser.add_argument("--url", required=True, help="Base URL of the Payload API")
    parser.add_argument("--rpm", type=int, default=600, help="Requests per minute")
    parser.add_argument("--duration", type=int, default=60, help="Test duration in seconds")

    args = parser.parse_args()

    results = asyncio.run(run_load_test(args.url.rstrip("/"), args.rpm, args.duration))
    print_results(results)


if __name__ == "__main__":
    main()
