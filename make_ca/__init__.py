"""make-ca -- clean architecture scaffolding for NestJS projects.

``make-ca init`` lays out a project skeleton; ``make-ca generate <entity>``
renders the domain, service, infrastructure and application files of one
entity into it.
"""

__version__ = "0.1.0"
