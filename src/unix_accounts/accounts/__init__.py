"""Accounts bounded context.

Reads the local user and group files into immutable snapshots and answers
user/group relationship queries over them.
"""
