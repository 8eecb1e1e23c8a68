#!/usr/bin/env python
"""
Runs backend/manage.py from the repository root:
    python manage.py check
instead of:
    python backend/manage.py check
"""
import os
import subprocess
import sys

if __name__ == "__main__":
    manage_py = os.path.join(os.path.dirname(os.path.abspath(__file__)), "backend", "manage.py")
    result = subprocess.run([sys.executable, manage_py, *sys.argv[1:]])
    sys.exit(result.returncode)
