"""
Test settings: an in-memory SQLite database and throwaway upload directories.
Must run before config.settings is first imported.
"""
import os
import tempfile

_tmp = tempfile.mkdtemp(prefix="mortgage-site-tests-")

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["UPLOAD_DIR"] = os.path.join(_tmp, "uploads")
os.environ["CLAIMS_UPLOAD_DIR"] = os.path.join(_tmp, "claims")
os.environ["ADMIN_API_KEY"] = "test-admin-key"
os.environ["LOG_LEVEL"] = "WARNING"
