#!/usr/bin/env python3
"""
Validation script for the slug redirect service.
Tests the live running service to ensure all functionality works correctly.

Registers a throwaway slug named ``validate-<timestamp>``; mappings cannot be
deleted, so point this at a staging store where possible.
"""

import argparse
import os
import sys
import time
from datetime import datetime

import requests


class ServiceValidator:
    """Validates slug redirect service functionality."""

    def __init__(self, base_url: str, api_key: str, default_url: str = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.default_url = default_url
        self.session = requests.Session()
        self.test_results = []

    def print_header(self, text: str):
        """Print a formatted header."""
        print(f"\n{'='*60}")
        print(f"  {text}")
        print(f"{'='*60}\n")

    def print_test(self, name: str, passed: bool, details: str = ""):
        """Print test result."""
        status = "✅ PASS" if passed else "❌ FAIL"
        self.test_results.append((name, passed))
        print(f"{status} - {name}")
        if details:
            print(f"       {details}")

    def _register(self, slug: str, url: str, api_key: str) -> requests.Response:
        return self.session.post(
            f"{self.base_url}/{slug}",
            json={"apiKey": api_key, "url": url},
            timeout=5,
        )

    def test_health_check(self) -> bool:
        """Test health check endpoint."""
        try:
            response = self.session.get(f"{self.base_url}/api/health", timeout=5)
            data = response.json()
            is_healthy = response.status_code == 200 and data.get("database") == "healthy"
            self.print_test("Health Check", is_healthy, f"DB: {data.get('database')}")
            return is_healthy
        except Exception as e:
            self.print_test("Health Check", False, f"Error: {str(e)}")
            return False

    def test_register(self, slug: str, url: str) -> bool:
        """Test registering a slug."""
        try:
            response = self._register(slug, url, self.api_key)
            data = response.json()
            ok = response.status_code == 201 and data == {"slug": slug, "url": url}
            self.print_test("Register Slug", ok, f"Status: {response.status_code}, Body: {data}")
            return ok
        except Exception as e:
            self.print_test("Register Slug", False, f"Error: {str(e)}")
            return False

    def test_redirect(self, slug: str, expected_url: str) -> bool:
        """Test slug redirect, with and without trailing slash."""
        try:
            ok = True
            for path in (f"/{slug}", f"/{slug}/"):
                response = self.session.get(
                    f"{self.base_url}{path}",
                    allow_redirects=False,
                    timeout=5,
                )
                location = response.headers.get("Location", "")
                ok = ok and response.status_code == 301 and location == expected_url
            self.print_test("Slug Redirect", ok, f"Redirects to: {location[:50]}")
            return ok
        except Exception as e:
            self.print_test("Slug Redirect", False, f"Error: {str(e)}")
            return False

    def test_duplicate_slug(self, slug: str) -> bool:
        """Test duplicate slug rejection."""
        try:
            response = self._register(slug, "https://different-url.example", self.api_key)
            data = response.json()
            ok = response.status_code == 400 and data.get("message") == "Slug already registered"
            self.print_test("Duplicate Slug Rejection", ok, f"Status: {response.status_code} (expected 400)")
            return ok
        except Exception as e:
            self.print_test("Duplicate Slug Rejection", False, f"Error: {str(e)}")
            return False

    def test_wrong_api_key(self) -> bool:
        """Test registration with a wrong API key."""
        try:
            response = self._register(
                f"nokey{int(time.time())}", "https://example.com/", self.api_key + "-wrong"
            )
            ok = response.status_code == 401
            self.print_test("Wrong API Key Rejection", ok, f"Status: {response.status_code} (expected 401)")
            return ok
        except Exception as e:
            self.print_test("Wrong API Key Rejection", False, f"Error: {str(e)}")
            return False

    def test_invalid_url(self) -> bool:
        """Test invalid URL rejection."""
        try:
            response = self._register(f"badurl{int(time.time())}", "not-a-url", self.api_key)
            ok = response.status_code == 400
            self.print_test("Invalid URL Rejection", ok, f"Status: {response.status_code} (expected 400)")
            return ok
        except Exception as e:
            self.print_test("Invalid URL Rejection", False, f"Error: {str(e)}")
            return False

    def test_unknown_slug(self) -> bool:
        """Test that an unknown slug redirects to the default URL."""
        try:
            response = self.session.get(
                f"{self.base_url}/missing{int(time.time())}",
                allow_redirects=False,
                timeout=5,
            )
            location = response.headers.get("Location", "")
            ok = response.status_code == 301
            if self.default_url:
                ok = ok and location == self.default_url
            self.print_test("Unknown Slug Fallback", ok, f"Redirects to: {location[:50]}")
            return ok
        except Exception as e:
            self.print_test("Unknown Slug Fallback", False, f"Error: {str(e)}")
            return False

    def run_all_tests(self) -> bool:
        """Run all validation tests."""
        self.print_header("Slug Redirect Service Validation")
        print(f"Testing service at: {self.base_url}")
        print(f"Timestamp: {datetime.now().isoformat()}\n")

        if not self.test_health_check():
            print("\n❌ Health check failed. Service may not be running.")
            print(f"   Make sure the service is accessible at {self.base_url}")
            return False

        print()

        slug = f"validate-{int(time.time())}"
        url = f"https://example.com/validate/{slug}"
        if self.test_register(slug, url):
            self.test_redirect(slug, url)
            self.test_duplicate_slug(slug)

        print()

        self.test_wrong_api_key()
        self.test_invalid_url()
        self.test_unknown_slug()

        self.print_summary()

        return all(passed for _, passed in self.test_results)

    def print_summary(self):
        """Print test summary."""
        total = len(self.test_results)
        passed = sum(1 for _, p in self.test_results if p)
        failed = total - passed

        self.print_header("Test Summary")
        print(f"Total Tests:  {total}")
        print(f"✅ Passed:     {passed}")
        print(f"❌ Failed:     {failed}")
        print(f"Success Rate: {(passed/total*100):.1f}%")

        if failed > 0:
            print("\n⚠️  Failed tests:")
            for name, passed in self.test_results:
                if not passed:
                    print(f"   - {name}")

        print()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Validate slug redirect service functionality"
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8080",
        help="Base URL of the service (default: http://localhost:8080)"
    )
    parser.add_argument(
        "--api-key",
        default=os.getenv("API_KEY"),
        help="Registration API key (defaults to $API_KEY)"
    )
    parser.add_argument(
        "--default-url",
        default=os.getenv("DEFAULT_URL"),
        help="Expected fallback redirect target (defaults to $DEFAULT_URL)"
    )

    args = parser.parse_args()

    if not args.api_key:
        print("An API key is required (--api-key or $API_KEY)")
        sys.exit(2)

    validator = ServiceValidator(args.url, args.api_key, args.default_url)

    try:
        success = validator.run_all_tests()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n\n⚠️  Validation interrupted by user")
        sys.exit(2)
    except Exception as e:
        print(f"\n\n❌ Validation failed with error: {str(e)}")
        sys.exit(3)


if __name__ == "__main__":
    main()
