"""Domain layer - Pure versioning logic.

This layer contains the version descriptor entity, version tokens and media
ranges (value objects), lifecycle states, domain errors, and protocols
(ports). The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: VersionDescriptor
- value_objects/: VersionToken, MediaRange and their parsers
- enums/: LifecycleState
- errors/: DuplicateVersionError, NegotiationError
- protocols/: Resource registry and logger interfaces

The domain layer defines WHAT versioning means, not HOW it's stored or served.
"""
