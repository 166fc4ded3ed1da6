#!/usr/bin/env python3
"""
Demo script that walks a running Video Catalog System through a full session.

Start the server first (python main.py), then run this script. It registers
a client, logs in, and exercises every video endpoint.
"""

import sys
import json
import uuid
import argparse

import requests

BASE_URL = "http://localhost:8000"


def call(method: str, endpoint: str, token: str = None, data: dict = None, params: dict = None) -> requests.Response:
    """Send one request and print the outcome"""
    headers = {"Authorization": token} if token else {}
    response = requests.request(method, f"{BASE_URL}{endpoint}", json=data, params=params, headers=headers, timeout=10)

    print(f"\n{method} {endpoint} {params or ''}")
    print(f"Status: {response.status_code}")
    if response.content:
        try:
            print(f"Response: {json.dumps(response.json(), indent=2)}")
        except ValueError:
            print(f"Response: {response.text}")
    return response


def expect(response: requests.Response, status: int, label: str) -> bool:
    if response.status_code == status:
        print(f"✅ {label}")
        return True
    print(f"❌ {label} (expected {status}, got {response.status_code})")
    return False


def main():
    global BASE_URL

    parser = argparse.ArgumentParser(description="Video Catalog System API demo")
    parser.add_argument("--url", default=BASE_URL, help="Base URL of the running server")
    args = parser.parse_args()
    BASE_URL = args.url.rstrip("/")

    print("🚀 Video Catalog System API Demo")
    print("=" * 50)

    username = f"demo-{uuid.uuid4().hex[:8]}"
    credentials = {"username": username, "password": "demo-password"}
    results = []

    try:
        results.append(expect(call("POST", "/register", data=credentials), 201, "Registered client"))
        results.append(expect(call("POST", "/register", data=credentials), 409, "Duplicate username rejected"))

        login = call("POST", "/login", data=credentials)
        results.append(expect(login, 200, "Logged in"))
        token = login.json()["token"] if login.status_code == 200 else ""

        results.append(expect(call("GET", "/videos"), 401, "Anonymous listing rejected"))

        created = call("POST", "/video/create", token=token, data={"title": "Demo", "url": "https://example.com/demo.mp4"})
        results.append(expect(created, 200, "Created video"))
        video_id = created.json()["id"] if created.status_code == 200 else ""

        results.append(expect(call("GET", "/video", token=token, params={"id": video_id}), 200, "Fetched video"))
        results.append(expect(call("PUT", "/video/update", token=token, params={"id": video_id}, data={"title": "Demo v2", "url": "https://example.com/demo2.mp4"}), 200, "Updated video"))
        results.append(expect(call("GET", "/videos", token=token), 200, "Listed videos"))
        results.append(expect(call("DELETE", "/video/delete", token=token, params={"id": video_id}), 204, "Deleted video"))
        results.append(expect(call("GET", "/video", token=token, params={"id": video_id}), 404, "Deleted video is gone"))

    except requests.exceptions.ConnectionError:
        print(f"❌ Connection failed - API server not running at {BASE_URL}")
        print("Make sure the API server is running with: python main.py")
        sys.exit(1)

    print("\n" + "=" * 50)
    print(f"{sum(results)}/{len(results)} checks passed")
    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()
