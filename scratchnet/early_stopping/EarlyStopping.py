
class EarlyStopping:
    """
    Stops training once validation accuracy (by default) has not improved for
    `patience` consecutive epochs.

    In 'max' mode the best value starts at `baseline` (0.0 unless given), so an
    epoch must score strictly above it to count as an improvement. In 'min'
    mode the first epoch always sets the best value unless a baseline is given.
    """

    def __init__(
        self,
        patience=2,
        min_delta=0.0,
        monitor="val_acc",
        mode="max",
        baseline=None,
        restore_best_weights=False,
    ):
        if mode not in ("min", "max"):
            raise ValueError(f"mode must be 'min' or 'max', got {mode!r}")
        if baseline is None and mode == "max":
            baseline = 0.0
        self.monitor = monitor
        self.mode = mode
        self.patience = patience
        self.min_delta = float(min_delta)
        self.restore_best_weights = restore_best_weights

        self.best = baseline
        self.best_epoch = -1
        self.wait = 0
        self.stopped = False
        self._best_snapshot = None

    def _is_better(self, current, best):
        if self.mode == "min":
            return current < (best - self.min_delta)
        else:  # 'max'
            return current > (best + self.min_delta)

    def update(self, epoch, metrics, model):
        """Record this epoch's metrics; returns True when training should stop."""
        value = metrics[self.monitor]
        if self.best is None or self._is_better(value, self.best):
            self.best = value
            self.best_epoch = epoch
            self.wait = 0
            if self.restore_best_weights:
                self._best_snapshot = model._snapshot_params()
        else:
            self.wait += 1
            if self.wait >= self.patience:
                self.stopped = True
                if self.restore_best_weights and self._best_snapshot is not None:
                    model._load_params(self._best_snapshot)
                return True
        return False
