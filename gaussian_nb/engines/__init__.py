"""
Numeric engines (pure numpy / scipy, no logging, no validation).

class_moments           (count, mean, M2) aggregate: Welford push, parallel merge
moment_estimate_engine  per-class aggregates of one labelled block
log_likelihood_engine   per-class unnormalized log posterior
decision_engine         MAP label + log-sum-exp normalization

Engines assume inputs were validated at the classifier / trainer boundary.
"""
