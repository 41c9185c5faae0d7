#!/usr/bin/env python3
"""
Smoke test against a running staff records server.

Logs in with each seeded account (see ``manage.py ensure_accounts``),
exercises the main endpoints and prints a summary.  Exits non-zero if
any call returned an unexpected status.

    python api_smoke.py [--base-url http://127.0.0.1:8000] [--report report.json]
"""
import argparse
import json
import sys
import time
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional

import requests

BASE_URL = "http://127.0.0.1:8000"

TEST_USERS = {
    "management": {"mcr_number": "M00001A", "password": "123456"},
    "hr": {"mcr_number": "H00001A", "password": "123456"},
    "doctor": {"mcr_number": "D00001A", "password": "123456"},
}

SMOKE_MCR = "SMOKE0001"


@dataclass
class CallResult:
    success: bool
    endpoint: str
    method: str
    status_code: int
    response_time: float
    error_message: str = ""
    description: str = ""
    user_role: str = ""


class SmokeTester:
    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.headers = {}
        self.current_role = None
        self.results = []
        self._last_json = {}

    @property
    def errors(self):
        return [r for r in self.results if not r.success]

    def login(self, role: str) -> bool:
        user = TEST_USERS[role]
        self.current_role = role
        result = self.call("POST", "/login", {**user, "selectedRole": role}, 200, f"login as {role}")
        if not result.success:
            return False
        token = self._last_json.get("token")
        self.headers = {"Authorization": f"Bearer {token}"}
        return True

    def call(self, method: str, endpoint: str, data: Optional[dict] = None,
             expected_status: int = 200, description: str = "") -> CallResult:
        url = f"{self.base_url}{endpoint}"
        start_time = time.time()
        self._last_json = {}
        try:
            response = self.session.request(method, url, json=data, headers=self.headers, timeout=10)
        except requests.RequestException as e:
            result = CallResult(False, endpoint, method, 0, time.time() - start_time,
                                str(e), description, self.current_role)
            print(f"❌ {method} {endpoint} - {e}")
            self.results.append(result)
            return result

        elapsed = time.time() - start_time
        ok = response.status_code == expected_status
        if ok and response.headers.get("Content-Type", "").startswith("application/json"):
            self._last_json = response.json()
        result = CallResult(ok, endpoint, method, response.status_code, elapsed,
                            "" if ok else response.text[:200], description, self.current_role)
        mark = "✅" if ok else "❌"
        print(f"{mark} {method} {endpoint} - {response.status_code} ({elapsed:.2f}s)")
        self.results.append(result)
        return result

    def run_role(self, role: str):
        if not self.login(role):
            return
        print(f"\n🧪 {role}")
        self.call("GET", "/auth/verify", None, 200, "verify token")
        self.call("GET", "/database", None, 200, "list staff")
        self.call("GET", "/main_data", None, 200, "list staff (main_data)")
        if role != "management":
            return
        # Staff rows are never hard-deleted, so a rerun needs a fresh database
        staff = {
            "mcr_number": SMOKE_MCR,
            "first_name": "Smoke",
            "last_name": role.upper(),
            "department": "QA",
            "appointment": "Tester",
            "email": "smoke@example.com",
        }
        self.call("POST", "/entry", staff, 201, "create staff")
        self.call("GET", f"/staff/{SMOKE_MCR}", None, 200, "get staff")
        self.call("PUT", f"/staff/{SMOKE_MCR}", {k: v for k, v in staff.items() if k != "mcr_number"},
                  200, "update staff")
        self.call("POST", f"/contracts/{SMOKE_MCR}", {
            "school_name": "NUS", "start_date": "2024-01-01", "end_date": "2024-12-31", "status": "active",
        }, 201, "add contract")
        self.call("GET", f"/contracts/{SMOKE_MCR}", None, 200, "list contracts")
        self.call("DELETE", f"/contracts/{SMOKE_MCR}?school_name=NUS&status=active&start_date=2024-01-01",
                  None, 200, "delete contract")
        self.call("DELETE", f"/staff/{SMOKE_MCR}", None, 200, "soft delete staff")
        self.call("PUT", f"/restore/{SMOKE_MCR}", None, 200, "restore staff")

    def run(self) -> bool:
        print("Staff records API smoke test")
        print("=" * 50)
        self.call("GET", "/healthz", None, 200, "health check")
        for role in TEST_USERS:
            self.session = requests.Session()
            self.headers = {}
            self.run_role(role)
        self.summary()
        return not self.errors

    def summary(self):
        total = len(self.results)
        passed = total - len(self.errors)
        print(f"\n🎯 {passed}/{total} passed")
        for i, error in enumerate(self.errors, 1):
            print(f"{i}. [{error.user_role}] {error.method} {error.endpoint} -> {error.status_code}")
            print(f"   {error.error_message}")

    def write_report(self, path: str):
        with open(path, "w", encoding="utf-8") as fh:
            json.dump({
                "timestamp": datetime.now().isoformat(),
                "total": len(self.results),
                "errors": len(self.errors),
                "results": [asdict(r) for r in self.results],
            }, fh, indent=2)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--base-url", default=BASE_URL)
    parser.add_argument("--report")
    args = parser.parse_args()
    tester = SmokeTester(args.base_url)
    ok = tester.run()
    if args.report:
        tester.write_report(args.report)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
