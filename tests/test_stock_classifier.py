"""Stock Classifier unit testleri."""

from src.models.inventory import AlertSeverity, StockStatus
from src.replenishment.alert_generator import build_alert
from src.replenishment.stock_classifier import classify, has_inverted_thresholds


class TestClassification:
    """Stok sağlık durumu sınıflandırması."""

    def test_zero_stock_is_out_of_stock(self, make_record):
        assert classify(make_record(current_stock=0)) == StockStatus.OUT_OF_STOCK

    def test_at_min_stock_is_critical(self, make_record):
        assert classify(make_record(current_stock=20)) == StockStatus.CRITICAL

    def test_between_min_and_reorder_point_is_low(self, make_record):
        assert classify(make_record(current_stock=21)) == StockStatus.LOW
        assert classify(make_record(current_stock=50)) == StockStatus.LOW

    def test_above_reorder_point_is_healthy(self, make_record):
        assert classify(make_record(current_stock=51)) == StockStatus.HEALTHY

    def test_out_of_stock_example(self, make_record):
        record = make_record(current_stock=0, min_stock=30, reorder_point=50, max_stock=200, avg_daily_sales=3.8)
        assert classify(record) == StockStatus.OUT_OF_STOCK

    def test_healthy_example(self, make_record):
        record = make_record(current_stock=180, min_stock=50, reorder_point=100, max_stock=400, avg_daily_sales=5.2)
        assert classify(record) == StockStatus.HEALTHY

    def test_monotonic_in_current_stock(self, make_record):
        """Stok arttıkça şiddet hiç artmamalı."""
        ranks = [classify(make_record(current_stock=s)).rank for s in range(0, 120)]
        assert ranks == sorted(ranks)
        assert ranks[0] == StockStatus.OUT_OF_STOCK.rank
        assert ranks[-1] == StockStatus.HEALTHY.rank


class TestDefensiveNormalization:
    """Bozuk veriler hata fırlatmadan normalize edilmeli."""

    def test_negative_stock_clamped_to_out_of_stock(self, make_record):
        assert classify(make_record(current_stock=-5)) == StockStatus.OUT_OF_STOCK

    def test_reorder_point_above_max_is_critical(self, make_record):
        record = make_record(current_stock=500, reorder_point=300, max_stock=200)
        assert has_inverted_thresholds(record) is True
        assert classify(record) == StockStatus.CRITICAL

    def test_min_above_reorder_point_is_critical(self, make_record):
        record = make_record(current_stock=150, min_stock=80, reorder_point=50)
        assert classify(record) == StockStatus.CRITICAL

    def test_min_equal_max_is_critical(self, make_record):
        record = make_record(current_stock=150, min_stock=100, reorder_point=100, max_stock=100)
        assert classify(record) == StockStatus.CRITICAL

    def test_inverted_thresholds_with_zero_stock_still_out_of_stock(self, make_record):
        record = make_record(current_stock=0, reorder_point=300, max_stock=200)
        assert classify(record) == StockStatus.OUT_OF_STOCK
        alert = build_alert(record)
        assert alert.severity == AlertSeverity.CRITICAL

    def test_valid_thresholds_not_inverted(self, make_record):
        assert has_inverted_thresholds(make_record()) is False
