from datetime import timedelta
from decimal import Decimal

import pytest

from models import Cost, Invoice, Payment
from models.invoice import DiscountType, InvoiceStatus
from schemas.invoice import InvoiceCreate, InvoiceItemRequest, InvoiceUpdate
from services.errors import NotFoundError, ValidationError
from services.invoice_service import InvoiceService
from services.sample_data import seed_sample_data


class TestCreateInvoice:

     def test_creates_draft_with_due_date(self, db_session, make_invoice, now):
          invoice = make_invoice(due_in_days=14)

          assert invoice.id is not None
          assert invoice.status == InvoiceStatus.DRAFT
          assert invoice.created_at == now
          assert invoice.due_date == now + timedelta(days=14)
          assert invoice.grand_total == Decimal("647.28")

     def test_invoice_without_items_is_not_persisted(self, db_session, now):
          request = InvoiceCreate(client_id=1, client_name="Empty", items=[])

          with pytest.raises(ValidationError):
               InvoiceService.create_invoice(db_session, request, now=now)

          assert db_session.query(Invoice).count() == 0

     def test_invalid_percentage_is_not_persisted(self, db_session, now):
          request = InvoiceCreate(
               client_id=1,
               client_name="Greedy",
               discount_kind=DiscountType.PERCENTAGE,
               discount=Decimal("150"),
               items=[InvoiceItemRequest(name="Thing", unit_price=Decimal("10"))],
          )
          with pytest.raises(ValidationError) as exc_info:
               InvoiceService.create_invoice(db_session, request, now=now)
          assert exc_info.value.errors == ["Percentage discount must be between 0-100"]
          assert db_session.query(Invoice).count() == 0

     def test_get_unknown_invoice(self, db_session):
          with pytest.raises(NotFoundError):
               InvoiceService.get_invoice(db_session, 12345)


class TestUpdateInvoice:

     def test_items_are_replaced(self, db_session, make_invoice, now):
          invoice = make_invoice()
          request = InvoiceUpdate(items=[InvoiceItemRequest(name="Retainer", unit_price=Decimal("1000"), quantity=2)])

          updated = InvoiceService.update_invoice(db_session, invoice.id, request, now=now)

          assert [i.name for i in updated.items] == ["Retainer"]
          assert updated.subtotal == Decimal("2000")

     def test_only_given_fields_change(self, db_session, make_invoice, now):
          invoice = make_invoice()
          request = InvoiceUpdate(discount_kind=DiscountType.FIXED, discount=Decimal("19.20"))

          updated = InvoiceService.update_invoice(db_session, invoice.id, request, now=now)

          assert updated.client_name == "Sample Client"
          assert len(updated.items) == 2
          assert updated.grand_total == Decimal("700.00")

     def test_due_date_counts_from_update_time(self, db_session, make_invoice, now):
          invoice = make_invoice(created=now - timedelta(days=40))
          later = now + timedelta(days=1)

          InvoiceService.update_invoice(db_session, invoice.id, InvoiceUpdate(due_in_days=5), now=later)

          assert invoice.due_date == later + timedelta(days=5)

     def test_failed_update_leaves_invoice_unchanged(self, db_session, make_invoice, now):
          invoice = make_invoice()
          before = (invoice.discount, [i.name for i in invoice.items], invoice.status, invoice.grand_total)

          with pytest.raises(ValidationError):
               InvoiceService.update_invoice(
                    db_session, invoice.id, InvoiceUpdate(items=[], discount=Decimal("5")), now=now
               )
          with pytest.raises(ValidationError):
               InvoiceService.update_invoice(
                    db_session, invoice.id, InvoiceUpdate(discount=Decimal("101")), now=now
               )

          assert (invoice.discount, [i.name for i in invoice.items], invoice.status, invoice.grand_total) == before

     def test_update_recomputes_status(self, db_session, make_invoice, now):
          invoice = make_invoice()
          InvoiceService.record_payment(db_session, invoice.id, Decimal("600"), "Cash", now=now)
          assert invoice.status == InvoiceStatus.PARTIAL

          # raising the discount to 100% leaves nothing to pay
          InvoiceService.update_invoice(db_session, invoice.id, InvoiceUpdate(discount=Decimal("100")), now=now)
          assert invoice.status == InvoiceStatus.PAID

     def test_update_unknown_invoice(self, db_session, now):
          with pytest.raises(NotFoundError):
               InvoiceService.update_invoice(db_session, 404, InvoiceUpdate(discount=Decimal("1")), now=now)


class TestRecordPayment:

     def test_partial_then_paid(self, db_session, make_invoice, now):
          invoice = make_invoice()

          payment = InvoiceService.record_payment(db_session, invoice.id, Decimal("300"), "Bank Transfer", now=now)
          assert payment.paid_at == now
          assert invoice.status == InvoiceStatus.PARTIAL
          assert invoice.total_due == Decimal("347.28")

          InvoiceService.record_payment(db_session, invoice.id, Decimal("347.28"), "Cash", now=now)
          assert invoice.status == InvoiceStatus.PAID
          assert invoice.total_due == 0

     def test_rejected_payment_keeps_status(self, db_session, make_invoice, now):
          invoice = make_invoice()
          with pytest.raises(ValidationError):
               InvoiceService.record_payment(db_session, invoice.id, Decimal("0"), "Cash", now=now)
          assert invoice.status == InvoiceStatus.DRAFT
          assert db_session.query(Payment).count() == 0


class TestDueReminders:

     def test_unpaid_invoices_inside_window(self, db_session, make_invoice, now):
          overdue = make_invoice(client_name="Late", due_in_days=-2)
          soon = make_invoice(client_name="Soon", due_in_days=3)
          make_invoice(client_name="Later", due_in_days=20)
          paid = make_invoice(client_name="Settled", due_in_days=1)
          InvoiceService.record_payment(db_session, paid.id, paid.grand_total, "Card", now=now)

          reminders = InvoiceService.due_reminders(db_session, threshold_days=7, now=now)

          assert [i.id for i in reminders] == [overdue.id, soon.id]

     def test_window_edge_is_inclusive(self, db_session, make_invoice, now):
          edge = make_invoice(due_in_days=7)
          assert InvoiceService.due_reminders(db_session, threshold_days=7, now=now) == [edge]


class TestRefreshStatuses:

     def test_marks_overdue_invoices(self, db_session, make_invoice, now):
          stale = make_invoice(due_in_days=-1)
          fresh = make_invoice(due_in_days=30)

          assert InvoiceService.refresh_statuses(db_session, now=now) == 1
          assert stale.status == InvoiceStatus.OVERDUE
          assert fresh.status == InvoiceStatus.DRAFT

          assert InvoiceService.refresh_statuses(db_session, now=now) == 0


class TestSampleData:

     def test_seeds_empty_store_once(self, db_session, now):
          assert seed_sample_data(db_session, now=now) is True
          assert seed_sample_data(db_session, now=now) is False

          assert db_session.query(Cost).count() == 1
          invoice = db_session.query(Invoice).one()
          assert invoice.client_name == "Sample Client"
          assert invoice.status == InvoiceStatus.SENT
          assert invoice.grand_total == Decimal("647.28")
          assert invoice.total_paid == Decimal("300")
          assert invoice.total_due == Decimal("347.28")
          assert invoice.payments[0].method == "Bank Transfer"
