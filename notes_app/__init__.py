"""
Notes Application Core.

- core/: configuration, logging, database, exceptions, composition root
- models/: SQLAlchemy row models
- schemas/: domain models
- store/: table access and the live note listing
- mappers/: row <-> domain conversion
- repositories/: domain-facing data access
- services/: use-case façade
- events/: change broadcast and one-shot effect channel
- presentation/: view models, reactive and saved state
- navigation/: routes and back stack host
"""
