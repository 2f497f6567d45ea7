"""Run the Streamlit dashboard or the API from project root. Use: python run_app.py [api]"""
import os
import subprocess
import sys

root = os.path.dirname(os.path.abspath(__file__))
if len(sys.argv) > 1 and sys.argv[1] == "api":
    subprocess.run([sys.executable, "-m", "staffing_intel.api"], cwd=root, check=True)
else:
    app_path = os.path.join(root, "staffing_intel", "app.py")
    subprocess.run([sys.executable, "-m", "streamlit", "run", app_path], cwd=root, check=True)
