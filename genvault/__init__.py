"""
GenVault Password Vault Client
Copyright (c) 2025

SECURITY NOTE:
Vault entries are stored by the remote GenVault service and travel between
this client and the service as plaintext JSON. Only point the client at a
service you trust, over HTTPS.
"""
