"""
Record read endpoints backed by the Postgres document store.
"""
