"""
Bills App - Purchase and sell bills

Staff record metal bought from and sold to customers. Each bill carries an
ordered list of items priced as rate per gram times weight, a 3% GST and a
shop-wide sequential bill number.

Architecture:
- Models: PurchaseBill, SellBill (shared BaseBill), BillTotals value object
- Services: BillService
- Views: RESTful API with ViewSets, printable HTML invoice
- Exceptions: Domain exception hierarchy
"""
