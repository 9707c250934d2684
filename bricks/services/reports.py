"""Financial report exports (PDF, Excel, CSV)."""
import csv
import io
from datetime import datetime

from flask import send_file
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
import xlsxwriter

EXPORT_FORMATS = ("pdf", "excel", "csv")
RECORD_HEADER = ["Date", "Type", "Category", "Description", "Student", "Amount"]

TABLE_STYLE = TableStyle([
    ('BACKGROUND', (0, 0), (-1, 0), colors.grey),
    ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
    ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
    ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
    ('BOTTOMPADDING', (0, 0), (-1, 0), 10),
    ('BACKGROUND', (0, 1), (-1, -1), colors.beige),
    ('GRID', (0, 0), (-1, -1), 1, colors.black),
])


def _rows(records):
    return [
        [
            r.date.isoformat(),
            r.type,
            r.category,
            r.description or "",
            r.student.name if r.student and r.student.name else "",
            f"{r.amount:.2f}",
        ]
        for r in records
    ]


def _summary_rows(summary):
    return [
        ['Income', f"{summary['income']:.2f}"],
        ['Expenses', f"{summary['expenses']:.2f}"],
        ['Balance', f"{summary['balance']:.2f}"],
    ]


def _download_name(extension):
    return f'financial_report_{datetime.utcnow().strftime("%Y%m%d")}.{extension}'


def export_pdf(records, summary, start_date, end_date):
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4)
    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"<b>Financial Report</b><br/>{start_date} to {end_date}", styles['Title']),
        Spacer(1, 20),
    ]

    summary_table = Table([['Metric', 'Value']] + _summary_rows(summary), colWidths=[200, 200])
    summary_table.setStyle(TABLE_STYLE)
    elements += [summary_table, Spacer(1, 30)]

    elements += [Paragraph("<b>Records</b>", styles['Heading2']), Spacer(1, 10)]
    records_table = Table([RECORD_HEADER] + _rows(records), repeatRows=1)
    records_table.setStyle(TABLE_STYLE)
    elements.append(records_table)

    doc.build(elements)
    buffer.seek(0)
    return send_file(
        buffer,
        mimetype='application/pdf',
        as_attachment=True,
        download_name=_download_name("pdf"),
    )


def export_excel(records, summary, start_date, end_date):
    output = io.BytesIO()
    workbook = xlsxwriter.Workbook(output)
    header_format = workbook.add_format({
        'bold': True,
        'bg_color': '#4154f1',
        'font_color': 'white',
        'align': 'center',
    })

    sheet = workbook.add_worksheet('Summary')
    sheet.write('A1', 'Financial Report', header_format)
    sheet.write('A2', f'Period: {start_date} to {end_date}')
    sheet.write(3, 0, 'Metric', header_format)
    sheet.write(3, 1, 'Value', header_format)
    for row, (label, value) in enumerate(_summary_rows(summary), start=4):
        sheet.write(row, 0, label)
        sheet.write(row, 1, value)

    records_sheet = workbook.add_worksheet('Records')
    for col, title in enumerate(RECORD_HEADER):
        records_sheet.write(0, col, title, header_format)
    for row, values in enumerate(_rows(records), start=1):
        for col, value in enumerate(values):
            records_sheet.write(row, col, value)

    workbook.close()
    output.seek(0)
    return send_file(
        output,
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
        as_attachment=True,
        download_name=_download_name("xlsx"),
    )


def export_csv(records, summary, start_date, end_date):
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(['Financial Report'])
    writer.writerow([f'Period: {start_date} to {end_date}'])
    writer.writerow([])
    writer.writerow(['Metric', 'Value'])
    writer.writerows(_summary_rows(summary))
    writer.writerow([])
    writer.writerow(RECORD_HEADER)
    writer.writerows(_rows(records))

    return send_file(
        io.BytesIO(output.getvalue().encode('utf-8')),
        mimetype='text/csv',
        as_attachment=True,
        download_name=_download_name("csv"),
    )


EXPORTERS = {
    "pdf": export_pdf,
    "excel": export_excel,
    "csv": export_csv,
}


def export_financial_report(export_format, records, summary, start_date, end_date):
    return EXPORTERS[export_format](records, summary, start_date, end_date)
