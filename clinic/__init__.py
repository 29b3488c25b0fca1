"""Clinic application for the veterinary backend.

This package contains the models, access policy, validation rule sets
(serializers), views and route registrations of the versioned REST API.
"""
