"""Domain layer - entities, errors and business rules.

Entities and the pure services (exclusivity validator, relationship index,
visibility resolver, access policy) have no framework dependencies.
"""
