#!/usr/bin/env python
"""
HTTP Client Example

Demonstrates how to call a JSON-RPC 2.0 server over HTTP, read typed results
and branch on the error taxonomy. Configure it with SEAM_JSONRPC_* variables,
e.g. SEAM_JSONRPC_URL=http://localhost:8332 SEAM_JSONRPC_USER=rpcuser.
"""

import logging
from typing import List

from seam_jsonrpc import (
    Client,
    ClientConfig,
    JsonRpcClientError,
    NonceMismatchError,
    RpcCallError,
    TransportError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def main():
    """Run HTTP client example"""
    config = ClientConfig.from_env()
    logger.info(f"Client configuration: {config.to_dict()}")

    with Client.from_config(config) as client:
        try:
            # Build and execute explicitly, then extract
            request = client.build_request("echo", ["Mary", "had", "a", "little", "lamb"])
            response = client.execute(request)
            words = response.get_result(List[str])
            logger.info(f"Echo returned {len(words)} words: {words}")

            # Or in one step
            count = client.call("getblockcount", into=int)
            logger.info(f"Block count: {count}")

        except RpcCallError as e:
            logger.error(f"Server returned error {e.code}: {e.message} (data: {e.data!r})")
        except TransportError as e:
            logger.error(f"Could not reach {client.url}: {e}")
        except NonceMismatchError as e:
            logger.error(f"Reply belonged to another request: {e}")
        except JsonRpcClientError as e:
            logger.error(f"Call failed ({e.kind.value}): {e}")

        logger.info(f"Requests built: {client.last_nonce()}")

if __name__ == "__main__":
    main()
