"""
FastAPI server for the tire load & I/P calculator.

Provides REST API endpoints, XLSX / PDF downloads and a simple HTML UI.
"""

from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

from tireload import __version__
from tireload.calculator.positions import LoadCalculator
from tireload.export.excel import workbook_bytes
from tireload.export.formatting import default_filename
from tireload.export.pdf import build_pdf
from tireload.models.inputs import (
    CalculationInputs,
    ReferenceData,
    SpeedFactorRow,
    TireSpec,
)
from tireload.models.outputs import CalculationResult
from tireload.physics.speed import EmptySpeedTableError, resolve_speed_row
from tireload.reference.loader import load_reference_data

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Create FastAPI app
app = FastAPI(
    title="Tire Load & I/P Calculator API",
    description="""
    Load per tire and inflation pressure per axle position, checked against
    ETRTO-style reference tables (overload at 115% of load index, consult
    the tire spec at 110% of standard inflation pressure).
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def _cached_reference_data() -> ReferenceData:
    return load_reference_data()


def get_reference_data() -> ReferenceData:
    """Dependency for the reference tire and speed tables."""
    try:
        reference = _cached_reference_data()
    except FileNotFoundError as e:
        raise HTTPException(status_code=503, detail=str(e))
    if not reference.tires:
        raise HTTPException(status_code=503, detail="Data not found: no tires in reference data")
    return reference


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


# HTML UI Template
HTML_UI = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Load &amp; I/P Calculation</title>
    <style>
        * { box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 1400px;
            margin: 0 auto;
            padding: 20px;
            background: #f5f5f5;
            color: #333;
        }
        h1 { color: #2c3e50; border-bottom: 3px solid #428bca; padding-bottom: 10px; }
        .warning {
            background: #fff3cd;
            border: 1px solid #ffc107;
            padding: 12px;
            border-radius: 4px;
            margin-bottom: 20px;
        }
        .container { display: flex; gap: 20px; flex-wrap: wrap; }
        .input-section, .output-section {
            flex: 1;
            min-width: 400px;
            background: white;
            padding: 20px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        textarea {
            width: 100%;
            height: 360px;
            font-family: 'Monaco', 'Menlo', monospace;
            font-size: 12px;
            padding: 10px;
            border: 1px solid #ddd;
            border-radius: 4px;
        }
        .buttons { margin-top: 15px; }
        button {
            padding: 12px 24px;
            font-size: 14px;
            cursor: pointer;
            border: none;
            border-radius: 4px;
            margin-right: 10px;
        }
        .btn-primary { background: #428bca; color: white; }
        .btn-secondary { background: #95a5a6; color: white; }
        table { border-collapse: collapse; width: 100%; font-size: 13px; }
        th { background: #428bca; color: white; padding: 6px; }
        td { border: 1px solid #ddd; padding: 6px; text-align: center; }
        .ok { color: #008000; font-weight: bold; }
        .overload { color: #ff0000; font-weight: bold; }
        .consult { color: #ff8c00; font-weight: bold; }
        .loading { color: #666; font-style: italic; }
    </style>
</head>
<body>
    <h1>Load &amp; I/P Calculation</h1>
    <div class="container">
        <div class="input-section">
            <h3>Vehicle Configuration (JSON)</h3>
            <textarea id="inputJson">{
  "tire_size": "11.00R20 / XZY3",
  "total_load_t": 35,
  "speed_kmh": 50,
  "positions": [
    {"id": "1", "load_distribution": 0.18, "tires_per_position": 2},
    {"id": "2", "load_distribution": 0.41, "tires_per_position": 4},
    {"id": "3", "load_distribution": 0.41, "tires_per_position": 4}
  ]
}</textarea>
            <div class="buttons">
                <button class="btn-primary" onclick="runCalculate()">Calculate</button>
                <button class="btn-secondary" onclick="download('xlsx')">Excel</button>
                <button class="btn-secondary" onclick="download('pdf')">PDF</button>
            </div>
        </div>
        <div class="output-section">
            <div id="results">
                <p class="loading">Enter the vehicle configuration and click Calculate.</p>
            </div>
        </div>
    </div>

    <script>
        function verdictClass(v) {
            if (v === 'OK') return 'ok';
            if (v === 'Over Load') return 'overload';
            return 'consult';
        }

        async function runCalculate() {
            const resultsDiv = document.getElementById('results');
            resultsDiv.innerHTML = '<p class="loading">Calculating...</p>';
            try {
                const input = JSON.parse(document.getElementById('inputJson').value);
                const response = await fetch('/calculate', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify(input)
                });
                if (!response.ok) {
                    const err = await response.json();
                    throw new Error(typeof err.detail === 'string' ? err.detail : JSON.stringify(err.detail));
                }
                renderResult(await response.json());
            } catch (e) {
                resultsDiv.innerHTML = `<p style="color:red;">Error: ${e.message}</p>`;
            }
        }

        function renderResult(data) {
            let html = `<h3>${data.tire.size} | ${data.total_load_t} Ton | ${data.speed_kmh} km/h</h3>`;
            html += `<p>Load Index ${data.tire.load_index} Kg, STD I/P ${data.tire.std_pressure_psi} Psi, `;
            html += `Speed Symbol ${data.tire.speed_symbol} (table row ${data.speed_row.speed} km/h)</p>`;
            if (data.warnings && data.warnings.length > 0) {
                html += `<div class="warning">${data.warnings.join('<br>')}</div>`;
            }
            html += '<table><tr><th>Position</th><th>Load Dist.</th><th>Load/Tire</th><th>I/P by ETRTO</th>';
            html += '<th>Result Load</th><th>Result I/P</th><th>Dmg Load</th><th>Dmg I/P</th></tr>';
            data.positions.forEach(r => {
                html += `<tr>
                    <td>Position ${r.position.id}</td>
                    <td>${(r.position.load_distribution * 100).toFixed(0)}%</td>
                    <td>${r.load_per_tire_kg.toFixed(2)} Kg</td>
                    <td>${r.ip_by_etrto_psi.toFixed(1)} Psi</td>
                    <td class="${verdictClass(r.result_load)}">${r.result_load}</td>
                    <td class="${verdictClass(r.result_ip)}">${r.result_ip}</td>
                    <td>${r.damage.load}</td>
                    <td>${r.damage.ip}</td>
                </tr>`;
            });
            html += '</table>';
            document.getElementById('results').innerHTML = html;
        }

        async function download(format) {
            try {
                const input = JSON.parse(document.getElementById('inputJson').value);
                const response = await fetch(`/export/${format}`, {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify(input)
                });
                if (!response.ok) {
                    const err = await response.json();
                    throw new Error(typeof err.detail === 'string' ? err.detail : JSON.stringify(err.detail));
                }
                const disposition = response.headers.get('Content-Disposition') || '';
                const match = disposition.match(/filename="([^"]+)"/);
                const blob = await response.blob();
                const link = document.createElement('a');
                link.href = URL.createObjectURL(blob);
                link.download = match ? match[1] : `Load_IP_Calc.${format}`;
                link.click();
                URL.revokeObjectURL(link.href);
            } catch (e) {
                document.getElementById('results').innerHTML = `<p style="color:red;">Error: ${e.message}</p>`;
            }
        }
    </script>
</body>
</html>
"""


def _calculate(reference: ReferenceData, inputs: CalculationInputs) -> CalculationResult:
    """Run a calculation, mapping input errors to 400 and missing speed data to 503."""
    try:
        return LoadCalculator(reference, inputs).generate_result()
    except EmptySpeedTableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


def _attachment(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve the HTML UI."""
    return HTML_UI


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/example", response_model=CalculationInputs, tags=["Reference"])
async def get_example():
    """Get an example vehicle configuration."""
    return CalculationInputs.example()


@app.get("/tires", response_model=list[TireSpec], tags=["Reference"])
async def list_tires(reference: ReferenceData = Depends(get_reference_data)):
    """List reference tires, sorted by size."""
    return reference.sorted_tires()


@app.get("/speed-table", response_model=list[SpeedFactorRow], tags=["Reference"])
async def speed_table(reference: ReferenceData = Depends(get_reference_data)):
    """Get the speed / load-factor table, ordered by speed."""
    return sorted(reference.speed_table, key=lambda r: r.speed)


@app.get("/speed-table/resolve", response_model=SpeedFactorRow, tags=["Reference"])
async def resolve_speed(
    speed: float = Query(..., ge=0, description="Vehicle speed in km/h"),
    reference: ReferenceData = Depends(get_reference_data),
):
    """Get the speed table row that applies to a speed."""
    try:
        return resolve_speed_row(reference.speed_table, speed)
    except EmptySpeedTableError as e:
        raise HTTPException(status_code=503, detail=str(e))


@app.post("/calculate", response_model=CalculationResult, tags=["Calculation"])
async def calculate(
    inputs: CalculationInputs,
    reference: ReferenceData = Depends(get_reference_data),
):
    """
    Calculate load per tire, inflation pressure and compliance for every
    axle position.

    Positions are returned in input order and all share one speed row.
    """
    return _calculate(reference, inputs)


@app.post("/export/xlsx", tags=["Export"])
async def export_xlsx(
    inputs: CalculationInputs,
    reference: ReferenceData = Depends(get_reference_data),
):
    """Download the calculation as an Excel workbook."""
    result = _calculate(reference, inputs)
    content = workbook_bytes(result, reference.speed_table)
    return _attachment(content, XLSX_MEDIA_TYPE, default_filename(result.tire.size, "xlsx"))


@app.post("/export/pdf", tags=["Export"])
async def export_pdf(
    inputs: CalculationInputs,
    reference: ReferenceData = Depends(get_reference_data),
):
    """Download the calculation as a PDF report."""
    result = _calculate(reference, inputs)
    content = build_pdf(result, reference.speed_table)
    return _attachment(content, "application/pdf", default_filename(result.tire.size, "pdf"))
