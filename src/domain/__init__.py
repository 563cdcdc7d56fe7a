"""Domain layer - Pure business logic.

This layer contains the attendance and payment entities, their state
machines, value objects, protocols (ports), and domain events. It has NO
dependencies on any framework or infrastructure.

Structure:
- entities/: Domain entities (mutable, have identity) and read models
- enums/: Closed sets of statuses, providers, currencies
- value_objects/: Value objects (immutable, no identity)
- protocols/: Repository and processor interfaces
- events/: Domain events (things that happened)
- errors/: Domain error constants and processor error types
"""
