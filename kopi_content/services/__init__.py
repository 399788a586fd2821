"""Business logic services.

Services hold the content rules (seeding, slugs, excerpts, ordering, cache
invalidation) and are called by routes. Dependencies (store, cache, seeder)
are passed in explicitly.
"""
