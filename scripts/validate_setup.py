"""Validate that the project is properly set up and configured."""

import sys
from pathlib import Path


def check_python_version() -> bool:
    """Check if Python version is 3.11+."""
    print("Checking Python version...")

    version = sys.version_info
    if version.major < 3 or (version.major == 3 and version.minor < 11):
        print(f"  ❌ Python {version.major}.{version.minor} detected")
        print("  → Python 3.11+ required")
        return False

    print(f"  ✓ Python {version.major}.{version.minor} detected")
    return True


def check_project_structure() -> bool:
    """Check if all required directories and files exist."""
    print("\nChecking project structure...")

    required_paths = [
        "car_rental/config.py",
        "car_rental/errors.py",
        "car_rental/models/car.py",
        "car_rental/models/reservation.py",
        "car_rental/state/ids.py",
        "car_rental/state/inventory.py",
        "car_rental/services/reservation_service.py",
        "car_rental/utils/logging.py",
        "pyproject.toml",
    ]

    missing = [path for path in required_paths if not Path(path).exists()]

    if missing:
        print("  ❌ Missing files:")
        for path in missing:
            print(f"     - {path}")
        return False

    print("  ✓ All required files present")
    return True


def check_settings() -> bool:
    """Check that settings load and produce a usable capacity table."""
    print("\nChecking configuration...")

    try:
        from car_rental.config import Settings
        from car_rental.state.inventory import InMemoryInventory
    except ImportError as e:
        print(f"  ❌ Package not importable: {e}")
        print("  → Run: pip install -e .")
        return False

    settings = Settings()
    capacity = settings.capacity_table()
    InMemoryInventory(capacity)

    for car_type, limit in capacity.items():
        print(f"  ✓ {car_type.name}: {limit} per day")

    if not any(capacity.values()):
        print("  ⚠️  Every car type has zero capacity; all requests will be rejected")

    print(f"  ✓ Environment: {settings.environment}, log level: {settings.log_level}")
    return True


def main() -> None:
    """Run all validation checks."""
    print("\n" + "=" * 60)
    print("  Car Rental Reservation Tracker - Setup Validation")
    print("=" * 60 + "\n")

    checks = [
        ("Python Version", check_python_version),
        ("Project Structure", check_project_structure),
        ("Configuration", check_settings),
    ]

    results = []
    for name, check in checks:
        try:
            result = check()
            results.append((name, result))
        except Exception as e:
            print(f"  ❌ Error during {name} check: {e}")
            results.append((name, False))

    print("\n" + "=" * 60)
    print("  Validation Summary")
    print("=" * 60)

    all_passed = True
    for name, passed in results:
        status = "✓" if passed else "❌"
        print(f"  {status} {name}")
        if not passed:
            all_passed = False

    print("=" * 60)

    if all_passed:
        print("\n✅ All checks passed! System is ready.")
        print("\nNext steps:")
        print("  1. Seed sample data: python scripts/seed_data.py")
        print("  2. Run tests: pytest")
    else:
        print("\n❌ Some checks failed. Please fix the issues above.")
        sys.exit(1)

    print()


if __name__ == "__main__":
    main()
