# config.py
"""
Application configuration.

Values come from the environment (a local .env file is loaded first) and
are exposed as module-level constants.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./cost_manager.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# --- HTTP ---
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
PORT = int(os.getenv("PORT", "10000"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Billing rules ---
# "allow" records overpayments and reports a negative balance due,
# "reject" refuses any payment larger than the outstanding balance.
OVERPAYMENT_ALLOW = "allow"
OVERPAYMENT_REJECT = "reject"
OVERPAYMENT_POLICY = os.getenv("OVERPAYMENT_POLICY", OVERPAYMENT_ALLOW).lower()
if OVERPAYMENT_POLICY not in (OVERPAYMENT_ALLOW, OVERPAYMENT_REJECT):
     raise ValueError(
          f"OVERPAYMENT_POLICY must be '{OVERPAYMENT_ALLOW}' or '{OVERPAYMENT_REJECT}', got '{OVERPAYMENT_POLICY}'"
     )

DUE_REMINDER_DAYS = int(os.getenv("DUE_REMINDER_DAYS", "7"))

# Seed the demo cost/invoice/payment on startup when the store is empty
SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "false").lower() == "true"
