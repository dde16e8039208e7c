"""Wallet records and recharge requests."""