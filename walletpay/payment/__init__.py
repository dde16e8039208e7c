"""Recharge transactions: models, SQL storage and settlement rules."""