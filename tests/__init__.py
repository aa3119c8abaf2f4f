import os

# Application modules build their engine at import time; keep tests off any real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AUTO_CREATE_TABLES"] = "true"
