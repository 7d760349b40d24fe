"""
security.py
Password hashing for the shared account (bcrypt, salted, one-way).
"""

import bcrypt

def _to_bcrypt_secret(password: str) -> bytes:
  """
  bcrypt only uses the first 72 BYTES of the password.
  Truncate explicitly so long passwords never raise.
  """
  pw = password.encode("utf-8")
  if len(pw) > 72:
    pw = pw[:72]
  return pw

def hash_password(password: str) -> str:
  salt = bcrypt.gensalt(rounds=10)
  return bcrypt.hashpw(_to_bcrypt_secret(password), salt).decode("utf-8")

def verify_password(password: str, password_hash: str) -> bool:
  try:
    return bcrypt.checkpw(_to_bcrypt_secret(password), password_hash.encode("utf-8"))
  except ValueError:
    # stored value is not a bcrypt hash
    return False
