"""Service layer: orchestration behind the CLI.

Services never print or exit; they return a ServiceResult.
"""
