# helpers/logger.py
import numpy as np
import csv, json, datetime, pathlib
import matplotlib

# non-GUI backend, plots are only ever written to disk
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.cm as colormap


class RunLogger:
    def __init__(self, root="runs", tag="run"):
        ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
        self.root = pathlib.Path(root)
        self.dir = self.root / f"{tag}_{ts}"
        self.dir.mkdir(parents=True, exist_ok=True)
        self.csv_path = self.dir / "history.csv"
        self.json_path = self.dir / "history.json"
        self.metrics = []  # list of dicts per epoch
        self._csv_header_written = False

    # ---------- logging ----------
    def log_epoch(self, epoch, **kwargs):
        row = {"epoch": int(epoch), **{k: float(v) for k, v in kwargs.items()}}
        self.metrics.append(row)
        with open(self.csv_path, "a", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(row.keys()))
            if not self._csv_header_written:
                writer.writeheader()
                self._csv_header_written = True
            writer.writerow(row)

    def save_json(self):
        with open(self.json_path, "w") as f:
            json.dump(self.metrics, f, indent=2)

    # ---------- plotting ----------
    def _plots_dir(self, subdir):
        out = self.dir / subdir
        out.mkdir(parents=True, exist_ok=True)
        return out

    def plot_error(self, history, tag="run", subdir="plots"):
        """
        Saves the per-epoch mean squared error curve as error_curve_<tag>.png.
        Returns the path, or None if there is nothing to plot.
        """
        train = history.get("train_error", [])
        if len(train) == 0:
            return None
        outdir = self._plots_dir(subdir)
        plt.figure()
        plt.plot(train, label="train error")
        plt.xlabel("Epoch")
        plt.ylabel("Squared Error")
        plt.title(f"Error vs Epochs ({tag})")
        plt.legend()
        plt.tight_layout()
        path = outdir / f"error_curve_{tag}_epochs_{len(train)}.png"
        plt.savefig(path, dpi=160)
        plt.close()
        return path

    def plot_val_metrics(self, history, tag="run", subdir="plots"):
        """
        Saves validation accuracy curve as val_metrics_<tag>.png if 'val_acc' is present.
        """
        val_acc = history.get("val_acc", [])
        if len(val_acc) == 0:
            return None
        outdir = self._plots_dir(subdir)
        plt.figure()
        plt.plot(val_acc, label="val accuracy")
        plt.xlabel("Epoch")
        plt.ylabel("Accuracy")
        plt.title(f"Validation Accuracy vs Epochs ({tag})")
        plt.legend()
        plt.tight_layout()
        path = outdir / f"val_metrics_{tag}_epochs_{len(val_acc)}.png"
        plt.savefig(path, dpi=160)
        plt.close()
        return path

    def plot_confusion_matrix(self, cm, tag="run", subdir="plots", class_names=None):
        """
        Saves confusion matrix heatmap as confusion_matrix_<tag>.png
        cm: (num_classes, num_classes) integer matrix
        """
        outdir = self._plots_dir(subdir)
        plt.figure(figsize=(8, 6))
        plt.imshow(cm, interpolation="nearest", cmap=colormap.Blues)
        plt.title(f"Confusion Matrix ({tag})")
        plt.colorbar()
        ticks = np.arange(cm.shape[0])
        rotation = 45
        if class_names is None:
            class_names = ticks
            rotation = 0
        plt.xticks(ticks, class_names, rotation=rotation)
        plt.yticks(ticks, class_names)

        thresh = cm.max() / 2.0 if cm.size > 0 else 0
        for i, j in np.ndindex(cm.shape):
            plt.text(
                j, i, format(cm[i, j], "d"),
                horizontalalignment="center",
                color="white" if cm[i, j] > thresh else "black",
            )

        plt.ylabel("True label")
        plt.xlabel("Predicted label")
        plt.tight_layout()
        path = outdir / f"confusion_matrix_{tag}.png"
        plt.savefig(path, dpi=160)
        plt.close()
        return path

    def plot_all(self, history, tag="run", subdir="plots"):
        self.plot_error(history, tag=tag, subdir=subdir)
        self.plot_val_metrics(history, tag=tag, subdir=subdir)

    # ---------- metrics calculation ----------
    def calculate_metrics_from_confusion_matrix(self, cm, eps=1e-12):
        """
        Macro precision/recall/F1 and accuracy from a confusion matrix where
        cm[i, j] counts samples of true class i predicted as j.
        """
        tp = np.diag(cm).astype(np.float64)
        fp = cm.sum(axis=0) - tp
        fn = cm.sum(axis=1) - tp

        precision = tp / (tp + fp + eps)
        recall = tp / (tp + fn + eps)
        f1 = 2 * precision * recall / (precision + recall + eps)

        total = np.sum(cm)
        accuracy = np.trace(cm) / total if total > 0 else 0.0

        return {
            'macro_precision': float(np.mean(precision)),
            'macro_recall': float(np.mean(recall)),
            'macro_f1': float(np.mean(f1)),
            'accuracy': float(accuracy),
            'precision_per_class': precision.tolist(),
            'recall_per_class': recall.tolist(),
            'f1_per_class': f1.tolist()
        }

    def calculate_metrics_from_predictions(self, y_true, y_pred, num_classes=10, eps=1e-12):
        cm = np.zeros((num_classes, num_classes), dtype=np.int64)
        for true_label, pred_label in zip(y_true, y_pred):
            cm[int(true_label), int(pred_label)] += 1

        metrics = self.calculate_metrics_from_confusion_matrix(cm, eps=eps)
        metrics['confusion_matrix'] = cm
        return metrics

    def save_metrics_summary(self, metrics, tag="run", filename="metrics_summary.json"):
        summary = {
            'experiment_tag': tag,
            'timestamp': datetime.datetime.now().isoformat(),
            'overall_metrics': {
                'accuracy': metrics.get('accuracy', 0.0),
                'macro_precision': metrics.get('macro_precision', 0.0),
                'macro_recall': metrics.get('macro_recall', 0.0),
                'macro_f1': metrics.get('macro_f1', 0.0)
            },
            'per_class_metrics': {
                'precision': metrics.get('precision_per_class', []),
                'recall': metrics.get('recall_per_class', []),
                'f1': metrics.get('f1_per_class', [])
            }
        }

        if 'confusion_matrix' in metrics:
            summary['confusion_matrix'] = np.asarray(metrics['confusion_matrix']).tolist()

        output_path = self.dir / filename
        with open(output_path, 'w') as f:
            json.dump(summary, f, indent=2)

        return str(output_path)
