"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases:
- MovieAssembler: builds the movie aggregate from a draft
- MovieService: movie writes, reads and cache invalidation
- GenreService, TheaterService, ActorService: reference catalogs

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
