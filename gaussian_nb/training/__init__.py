"""
Training paradigms
------------------

1) Batch replace   : train(data, labels, incremental=False)
   - existing parameters discarded, model re-estimated from the block

2) Batch merge     : train(data, labels, incremental=True)   (default)
   - block aggregates merged into stored (count, mean, M2)

3) Single point    : train_point(point, label)
   - Welford update of one class

All three agree (within floating tolerance) on the same multiset of points.
"""
