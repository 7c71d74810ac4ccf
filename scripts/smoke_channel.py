"""
Smoke check against a running server (emoji-picker start).
Usage: python scripts/smoke_channel.py [base_url]
"""
import time
import requests
import sys

API_URL = sys.argv[1] if len(sys.argv) > 1 else "http://127.0.0.1:8000"
CHANNEL_URL = f"{API_URL}/api/channels/emoji_picker"

def wait_for_server(timeout=30):
    print("Waiting for server...")
    start = time.time()
    while time.time() - start < timeout:
        try:
            resp = requests.get(f"{API_URL}/api/version", timeout=1)
            if resp.status_code == 200:
                print(f"Server Up! Version: {resp.json().get('version')}")
                return True
        except requests.RequestException:
            pass
        time.sleep(1)
    return False

def check_channel():
    print("Checking emoji_picker channel...")
    batch = {"grin": "\U0001F600", "none": "\uFFFF"}
    try:
        resp = requests.post(CHANNEL_URL, json={"method": "checkAvailability", "arguments": {"emoji": batch}}, timeout=10)
        if resp.status_code != 200:
            print(f"FAILURE: Status {resp.status_code}")
            print(f"Response: {resp.text}")
            return False

        available = resp.json()["result"]
        if "none" in available:
            print(f"FAILURE: U+FFFF reported as available: {available}")
            return False
        print(f"SUCCESS: available = {sorted(available)}")

        resp = requests.post(CHANNEL_URL, json={"method": "noSuchMethod"}, timeout=10)
        if resp.status_code != 501:
            print(f"FAILURE: unknown method answered with {resp.status_code}")
            return False
        print("SUCCESS: unknown method is not implemented")
        return True
    except requests.RequestException as e:
        print(f"FAILURE: Request Exception: {e}")
        return False

if __name__ == "__main__":
    if wait_for_server():
        if check_channel():
            sys.exit(0)
    sys.exit(1)
