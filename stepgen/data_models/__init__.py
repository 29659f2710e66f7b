"""
stepgen/data_models/__init__.py

Pydantic data models: parameter types and generated expressions.
"""
