import os
from dotenv import load_dotenv
load_dotenv()

NONCE_PATH = os.getenv("CIPHERKIT_NONCE_PATH", "fixtures/chacha20.nonce")
JWT_SECRET_PATH = os.getenv("CIPHERKIT_JWT_SECRET_PATH", "fixtures/chacha20.key")
JWT_AUDIENCES = [
    aud.strip()
    for aud in os.getenv("CIPHERKIT_JWT_AUDIENCES", "tencent,alibaba,netease").split(",")
    if aud.strip()
]
LOG_LEVEL = os.getenv("CIPHERKIT_LOG_LEVEL", "WARNING")
LOG_DIR = os.getenv("CIPHERKIT_LOG_DIR") or None
