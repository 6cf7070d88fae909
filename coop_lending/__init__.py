"""
Coop Lending - Cooperative Savings, Tiered Lending & Penalty Service

A FastAPI-based service that classifies cooperative members into tiers,
checks loan eligibility, prices flat-rate loans and computes overdue
penalties for the agricultural cooperative platform.
"""

__version__ = "0.1.0"
