"""
Cross‑cutting pieces shared by the API and the stores: settings,
logging setup, request dependencies and the reader/writer lock.
"""
