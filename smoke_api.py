#!/usr/bin/env python3
"""
Smoke check for a running medical scheduling backend.

Exercises every endpoint of the three entities against a live server and
reports the failures.  The server must be reachable at ``BASE_URL``
(override with the ``SMOKE_BASE_URL`` environment variable).

    python manage.py runserver
    python smoke_api.py
"""
import os
import sys
import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

BASE_URL = os.getenv("SMOKE_BASE_URL", "http://127.0.0.1:8000")


@dataclass
class CheckResult:
    success: bool
    endpoint: str
    method: str
    status_code: int
    response_time: float
    error_message: str = ""
    description: str = ""


class SmokeRunner:
    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self.results: List[CheckResult] = []

    def call(self, method: str, endpoint: str, data: Optional[Dict] = None,
             expected_status: int = 200, description: str = "") -> Optional[Any]:
        """Call one endpoint and record whether the status matched."""
        url = f"{self.base_url}{endpoint}"
        start_time = time.time()
        try:
            response = self.session.request(method.upper(), url, json=data, timeout=10)
        except requests.RequestException as e:
            result = CheckResult(False, endpoint, method, 0, time.time() - start_time, str(e), description)
            self.results.append(result)
            print(f"❌ {method} {endpoint} - error: {e}")
            return None

        response_time = time.time() - start_time
        ok = response.status_code == expected_status
        result = CheckResult(
            success=ok,
            endpoint=endpoint,
            method=method,
            status_code=response.status_code,
            response_time=response_time,
            error_message="" if ok else response.text[:200],
            description=description,
        )
        self.results.append(result)
        mark = "✅" if ok else "❌"
        print(f"{mark} {method} {endpoint} - {response.status_code} ({response_time:.2f}s) {description}")
        try:
            return response.json()
        except ValueError:
            return None

    def check_entity(self, name: str, payload: Dict, partial: Dict) -> Optional[int]:
        """Run the full lifecycle for one entity and return the created id."""
        created = self.call("POST", f"/api/{name}", payload, 201, f"create {name}")
        if not created:
            return None
        pk = created["id"]
        self.call("GET", f"/api/{name}", None, 200, f"list {name}")
        self.call("GET", f"/api/{name}?active=true&page=1&pageSize=5", None, 200, f"page {name}")
        self.call("GET", f"/api/{name}/{pk}", None, 200, f"get {name}")
        self.call("PUT", f"/api/{name}/{pk}", payload, 200, f"full update {name}")
        self.call("PATCH", f"/api/{name}/update-partial", {"id": pk, **partial}, 200, f"partial update {name}")
        self.call("PATCH", f"/api/{name}/update-partial", {"id": 0, **partial}, 400, f"partial update {name} bad id")
        self.call("PATCH", f"/api/{name}/update-partial", {"id": 999999, **partial}, 404, f"partial update {name} unknown")
        self.call("PATCH", f"/api/{name}/delete-logic", {"id": pk, "status": False}, 200, f"deactivate {name}")
        self.call("PATCH", f"/api/{name}/delete-logic", {"id": pk, "status": True}, 200, f"reactivate {name}")
        self.call("PATCH", f"/api/{name}/delete-logic", {"id": 999999, "status": False}, 404, f"deactivate {name} unknown")
        return pk

    def run(self) -> int:
        self.call("GET", "/healthz", None, 200, "health check")

        suffix = uuid.uuid4().hex[:8]
        unique = int(time.time()) % 10_000_000
        patient_id = self.check_entity(
            "Patient",
            {"name": "Smoke Patient", "email": f"smoke-{suffix}@example.com", "phone": 5551234, "dni": 10_000_000 + unique},
            {"name": "Smoke Patient Renamed"},
        )
        doctor_id = self.check_entity(
            "Doctor",
            {"name": "Dr. Smoke", "specialty": "General Medicine"},
            {"specialty": "Cardiology"},
        )
        appointment_id = None
        if patient_id and doctor_id:
            appointment_id = self.check_entity(
                "Appointment",
                {"date": "2030-01-15T10:00:00Z", "reason": "Smoke check", "patientId": patient_id, "doctorId": doctor_id},
                {"reason": "Smoke check (rescheduled)"},
            )

        # Clean up: appointment first, the references are protected
        if appointment_id:
            self.call("DELETE", f"/api/Appointment/{appointment_id}", None, 200, "delete appointment")
        if patient_id:
            self.call("DELETE", f"/api/Patient/{patient_id}", None, 200, "delete patient")
        if doctor_id:
            self.call("DELETE", f"/api/Doctor/{doctor_id}", None, 200, "delete doctor")

        failures = [r for r in self.results if not r.success]
        print(f"\n{len(self.results) - len(failures)}/{len(self.results)} checks passed")
        for r in failures:
            print(f"  - {r.method} {r.endpoint} ({r.description}): {r.status_code} {r.error_message}")
        return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(SmokeRunner().run())
