"""
Use Cases

Organized into domain folders:
- auth/: Login audit
- alerts/: Alert acknowledgement and resolution
- users/: User suspension and listing
- evidence/: Evidence vault
- simulation/: Emergency simulation
- audit/: Audit trail
- dashboard/: Derived statistics
- settings/: Console settings
"""
