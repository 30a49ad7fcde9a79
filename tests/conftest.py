import os
import tempfile

# logs and the default data file go to a throwaway home during tests
os.environ.setdefault("PC_HOME_DIR", tempfile.mkdtemp(prefix="petcli-test-"))
