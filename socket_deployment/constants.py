from pathlib import Path

import socket_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(socket_deployment.__file__).parent
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"

#
# Contracts
#

SOCKET_CONTRACT_NAME = "Socket"

# Params file keys naming the deployed contracts the Socket is wired to
SOCKET_DEPENDENCIES = ("hasher", "vault")

DEFAULT_REQUIRED_CONFIRMATIONS = 1
