"""Domain layer - pure business logic.

Structure:
- enums/: Security levels, roles, departments, access models, auth states
- entities/: Subject (mutable, identity) and Resource (immutable snapshot)
- value_objects/: PolicyConfig, Decision, CaptchaChallenge
- policy/: PolicyEvaluator and PasswordPolicy (pure functions)
- protocols/: Ports implemented by infrastructure
- events/: Things that happened
- errors/: Lockout and privilege error values

The domain layer has NO dependencies on infrastructure.
"""
