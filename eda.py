import os

import matplotlib.pyplot as plt
import seaborn as sns
from sklearn.metrics import roc_curve


def _save(path):
    plt.tight_layout()
    plt.savefig(path)
    plt.close()
    print(f"Saved plot to {path}")
    return path


def plot_cancellations_by_month(by_month, out_dir):
    plt.figure(figsize=(10, 6))
    sns.barplot(x='Month', y='Flights_Canceled', data=by_month, color='steelblue')
    plt.title('Canceled Flights by Month')
    plt.xlabel('Month')
    plt.ylabel('Flights Canceled')
    plt.grid(axis='y', alpha=0.3)
    return _save(os.path.join(out_dir, 'canceled_by_month.png'))


def plot_class_balance(balance, out_dir, name='class_balance.png', title='Canceled'):
    plt.figure(figsize=(6, 5))
    sns.barplot(x=balance.index.astype(str).values, y=balance['Count'].values, color='gray')
    plt.title(title)
    plt.xlabel('Class')
    plt.ylabel('Count')
    return _save(os.path.join(out_dir, name))


def plot_carrier_cancellations(cancellations, out_dir):
    plt.figure(figsize=(8, 6))
    sns.barplot(
        x='UniqueCarrier',
        y='Percent_Cancelled',
        hue='UniqueCarrier',
        data=cancellations,
        palette='magma',
        legend=False
    )
    plt.title('Canceled Flights')
    plt.xlabel('Carrier')
    plt.ylabel('% Canceled')
    return _save(os.path.join(out_dir, 'carrier_cancellations.png'))


def plot_feature_importance(imp, out_dir):
    plt.figure(figsize=(10, 5))
    sns.barplot(x='Gain', y='Feature', hue='Feature', data=imp, palette='viridis', legend=False)
    plt.title('Feature Importance: What Drives Cancellations')
    plt.xlabel('Relative Importance (Gain)')
    return _save(os.path.join(out_dir, 'feature_importance.png'))


def plot_roc_curves(results, y_test, out_dir):
    plt.figure(figsize=(10, 8))

    for name, data in results.items():
        fpr, tpr, _ = roc_curve(y_test, data['Probs'])
        plt.plot(fpr, tpr, label=f"{name} (AUC = {data['AUC']:.2f})")

    plt.plot([0, 1], [0, 1], 'k--', label='Random Guess (0.50)')
    plt.title('Which Model Predicts Cancellations Best?')
    plt.xlabel('False Positive Rate')
    plt.ylabel('True Positive Rate')
    plt.legend(loc='lower right')
    plt.grid(True, alpha=0.3)
    return _save(os.path.join(out_dir, 'roc_curves.png'))
