#!/usr/bin/env python3
"""
Example client: render a chart with both request layouts and fetch the images

Needs the examples extra (pip install ".[examples]"). Start the service first:

    linechart-web --config settings.ini
"""

import argparse
import base64
from pathlib import Path

import httpx


def render(client: httpx.Client, path: str, body: dict) -> str:
    response = client.post(path, json=body)
    data = response.json()
    if "Link" not in data:
        raise SystemExit(f"Render failed: {data['Message']}")
    print(f"{path}: {data['Link']} ({data['Message']})")
    return data["Link"]


def fetch(client: httpx.Client, link: str, target: Path) -> None:
    data = client.get(link).json()
    if "Data" not in data:
        raise SystemExit(f"Retrieval failed: {data['Message']}")
    target.write_bytes(base64.b64decode(data["Data"]))
    print(f"Saved {target}")


def main() -> None:
    parser = argparse.ArgumentParser(description="linechart example client")
    parser.add_argument("--url", default="http://127.0.0.1:50001", help="Service base URL")
    parser.add_argument("--out", default=".", help="Directory for downloaded charts")
    args = parser.parse_args()
    out = Path(args.out)

    with httpx.Client(base_url=args.url, timeout=30.0) as client:
        print(client.get("/line/ping").json()["Message"])

        simple = render(
            client,
            "/line/simple",
            {
                "X_Start": 0,
                "X_End": 5,
                "Y_Points": [
                    [
                        {"Caption": "Sales", "Points": [10, 20, 30, 25, 40]},
                        {"Caption": "Costs", "Points": [8, 12, 18, 20, 22]},
                    ]
                ],
            },
        )
        fetch(client, simple, out / "simple.png")

        dual = render(
            client,
            "/line",
            {
                "X_Start": 0,
                "X_End": 10,
                "Points": [
                    [
                        {"Caption": "Sensor A", "X_Points": [0, 2, 4, 6, 8], "Y_Points": [1, 4, 9, 16, 25]},
                        {"Caption": "Sensor B", "X_Points": [1, 3, 5, 7, 9], "Y_Points": [2, 3, 5, 7, 11]},
                    ]
                ],
            },
        )
        fetch(client, dual, out / "dual.png")


if __name__ == "__main__":
    main()
