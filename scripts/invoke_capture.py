"""Capture client (smoke test).

Calls a running DeskShot server the way an automation client would:

callTool(capture) -> decode base64_image -> write a local copy

Useful for checking that the server is reachable from another machine and
that the inline image decodes to the same PNG the server saved.

# Example usage (from repo root):
python scripts/invoke_capture.py --url http://192.168.1.20:8000 --window Calendar --switch --subwindow-key 2 -o calendar.png

Notes:
- Uses the nested params.data shape with --nested, the flat shape otherwise.
- Without -o the image is requested but not written anywhere.
"""

from __future__ import annotations

import argparse
import base64
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="DeskShot capture smoke test")
    p.add_argument("--url", type=str, default="http://localhost:8000", help="Server base URL")
    p.add_argument("--list", action="store_true", help="Only call listTools and print the result")
    p.add_argument("--window", type=str, default=None, help="Application to bring forward")
    p.add_argument("--switch", action="store_true", help="Actually switch to --window")
    p.add_argument("--subwindow-key", type=str, default="", help="Cmd+<key> shortcut to send after switching")
    p.add_argument("--no-image", action="store_true", help="Ask the server not to inline the image")
    p.add_argument("--nested", action="store_true", help="Send arguments under params.data")
    p.add_argument("-o", "--output", type=str, default=None, help="Write the decoded image here")
    return p.parse_args(argv)


def build_call(args: argparse.Namespace) -> Dict[str, Any]:
    arguments: Dict[str, Any] = {
        "region": "full",
        "includeBase64": not args.no_image,
    }
    if args.window:
        arguments["windowName"] = args.window
        arguments["switchToWindow"] = args.switch
    if args.subwindow_key:
        arguments["switchToSubwindow"] = True
        arguments["subwindowKey"] = args.subwindow_key

    tool = {"name": "capture", "arguments": arguments}
    params = {"data": tool} if args.nested else tool
    return {"method": "callTool", "params": params}


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    endpoint = args.url.rstrip("/") + "/invoke"

    body = {"method": "listTools"} if args.list else build_call(args)
    # Captures can take several seconds of settle delays
    response = httpx.post(endpoint, json=body, timeout=60.0)

    if response.status_code != 200:
        try:
            error = response.json().get("error")
        except (ValueError, AttributeError):
            error = response.text.strip() or response.reason_phrase
        print(f"❌ {response.status_code}: {error}")
        return 1

    payload = response.json()

    if args.list:
        print(json.dumps(payload, indent=2))
        return 0

    for item in payload.get("content", []):
        if item.get("type") == "text":
            print(f"✅ {item['text']}")
        elif item.get("type") == "base64_image":
            data = base64.b64decode(item["data"])
            print(f"🖼️  Received {len(data)} bytes of image data")
            if args.output:
                Path(args.output).write_bytes(data)
                print(f"   Written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
