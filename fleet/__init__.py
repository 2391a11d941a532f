"""
Container Fleet Manager — Domain Package
========================================
Layered (Ports & Adapters style) architecture, no external I/O.

Layer map
─────────────────────────────────────────────────────
  config/       All tuneable settings (ship defaults, policy switches)
  domain/       Pure business objects (containers, ship, exceptions) — no I/O
  services/     Orchestration logic: fleet registry + cached wiring
  tests/        Full test suite: unit / e2e

The interactive menu, input parsing and console rendering live outside this
package: a caller builds containers with ``new_container()``, hands them to a
``Ship`` (or a ``FleetService``) and renders the ``ShipInfo`` snapshots.
"""
__version__ = "1.0.0"
