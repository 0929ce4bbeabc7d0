"""Relational data model for a vacation-rental marketplace"""
