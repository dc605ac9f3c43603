"""Scenario data model: values, tokens, transactions, accounts and steps."""