import io
import logging
from datetime import datetime
from typing import Dict, Optional

import pandas as pd
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo
from sqlalchemy.orm import Session

from inventory_api.models import Direction, Model, Room, Status, User
from inventory_api.services.dropdown import user_display_text
from inventory_api.services.resource import ResourceDefinition, ResourceService

logger = logging.getLogger(__name__)

SHEET_NAME = "Оборудование"

COLUMNS = [
    "ID", "Наименование", "Инвентарный номер", "Аудитория", "Ответственный",
    "Временно ответственный", "Стоимость", "Направление", "Статус", "Модель", "Комментарий",
]


class EquipmentExportService:
    def __init__(self, db: Session, definition: ResourceDefinition):
        self.db = db
        self.resources = ResourceService(db, definition)

    def _names(self, model) -> Dict[int, str]:
        return {row.id: row.name for row in self.db.query(model.id, model.name).all()}

    def export_equipment_to_excel(self,
                                  search: Optional[str] = None,
                                  sort_by: Optional[str] = None,
                                  sort_order: Optional[str] = None) -> io.BytesIO:
        equipment_list = self.resources.list(search=search, sort_by=sort_by, sort_order=sort_order)

        rooms = self._names(Room)
        directions = self._names(Direction)
        statuses = self._names(Status)
        models = self._names(Model)
        users = {user.id: user_display_text(user) for user in self.db.query(User).all()}

        data = []
        for eq in equipment_list:
            data.append({
                'ID': eq.id,
                'Наименование': eq.name,
                'Инвентарный номер': eq.inventory_number,
                'Аудитория': rooms.get(eq.room_id, ''),
                'Ответственный': users.get(eq.responsible_user_id, ''),
                'Временно ответственный': users.get(eq.temp_responsible_user_id, ''),
                'Стоимость': float(eq.cost) if eq.cost is not None else '',
                'Направление': directions.get(eq.direction_id, ''),
                'Статус': statuses.get(eq.status_id, ''),
                'Модель': models.get(eq.model_id, ''),
                'Комментарий': eq.comment or '',
            })

        df = pd.DataFrame(data, columns=COLUMNS)

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine='openpyxl') as writer:
            df.to_excel(writer, sheet_name=SHEET_NAME, index=False)

            worksheet = writer.sheets[SHEET_NAME]

            num_rows, num_cols = df.shape

            # an Excel table needs at least one data row
            if num_rows:
                last_col_letter = get_column_letter(num_cols)
                table_ref = f"A1:{last_col_letter}{num_rows + 1}"

                display_name = f"Equipment_{datetime.now().strftime('%Y%m%d%H%M%S')}"

                table = Table(displayName=display_name, ref=table_ref)

                style = TableStyleInfo(
                    name="TableStyleMedium9",
                    showFirstColumn=False,
                    showLastColumn=False,
                    showRowStripes=True,
                    showColumnStripes=False,
                )
                table.tableStyleInfo = style
                worksheet.add_table(table)

            for column_cells in worksheet.columns:
                max_length = max(len(str(cell.value)) for cell in column_cells if cell.value is not None)
                column_letter = column_cells[0].column_letter
                adjusted_width = min(max_length + 2, 50)
                worksheet.column_dimensions[column_letter].width = adjusted_width

        logger.info(f"Exported {len(data)} equipment rows to Excel")
        output.seek(0)
        return output
