"""
Embedded demo feedback shown before any file or spreadsheet is loaded.
"""
from feedback_intel.data.schemas import FeedbackRecord

SAMPLE_RECORDS = [
    FeedbackRecord(
        date="2025-11-07", supplier_name="Longman's Cheese",
        label="Picking & Warehouse", sub_label="Picking Slips", micro_label="Customer code",
        price=0.0,
        message=(
            "They are really keen to have the customer codes added to the invoices, so when a "
            "customer rings them for a query they can ask for the code to locate the account "
            "and save any potential issues."
        ),
    ),
    FeedbackRecord(
        date="2025-11-07", supplier_name="First Choice",
        label="Uncategorized", sub_label="Uncategorized", micro_label="Uncategorized",
        price=0.0,
        message="Supplier: First Choice\nType: Goods In Process\nPriority: Medium\nComment:",
    ),
    FeedbackRecord(
        date="2025-11-07", supplier_name="Imran Brothers",
        label="Pricing", sub_label="Price History", micro_label="Per_customer history",
        price=0.0,
        message=(
            "Would like to see 'sold price' history per product per customer on the order entry "
            "page - last sold price and date last purchased. Saw something similar to this on "
            "Sage and believes it would support their telesales team whilst taking and "
            "confirming orders."
        ),
    ),
    FeedbackRecord(
        date="2025-11-06", supplier_name="Parisi",
        label="Logistics (Delivery & Runs)", sub_label="Delivery Runs",
        micro_label="Multiple runs per customer",
        price=2590.0,
        message=(
            "Parisi needs to have multiple log ins for each venue departments - for eg. Rockpool "
            "need to have a Parisi log in for Bar, Juice and F+V."
        ),
    ),
    FeedbackRecord(
        date="2025-11-06", supplier_name="Box Fresh",
        label="Buying (Procurement)", sub_label="Purchase Orders", micro_label="Partial orders",
        price=0.0,
        message=(
            "Box Fresh essentially have two groups of products, 'Rebel Group Products' and "
            "'Non Rebel Group Products'."
        ),
    ),
    FeedbackRecord(
        date="2025-11-06", supplier_name="Sher Wagyu",
        label="Picking & Warehouse", sub_label="Picking Slips", micro_label="Customer code",
        price=0.0,
        message="Would like the Product Code visible when picking as per the screenshot below",
    ),
]
