APP_TITLE = "kanban-md"

BOARD_FILE = "kanban.yaml"
ARCHIVE_FILE = "archive.yaml"

LANG_PACK = {
    "en": {
        "confirm.title": "Confirm",
        "confirm.cancel": "Cancel",
        "confirm.ok": "Delete",
        "confirm.deleteTask.title": "Delete task",
        "confirm.deleteTask": 'Permanently delete task "{title}"? This action cannot be undone.',
        "confirm.deleteSubtask.title": "Delete subtask",
        "confirm.deleteSubtask": 'Delete subtask "{title}"?',
        "confirm.deleteProject.title": "Remove project",
        "confirm.deleteProject": 'Remove project "{name}" from the recent list? Your files will not be deleted.',
        "board.newTask": "+ New task",
        "board.noTasks": "No tasks",
        "board.untitled": "(untitled)",
        "sidebar.title": "Projects",
        "sidebar.empty": "No recent projects",
        "detail.meta": "Details",
        "detail.editor": "Task",
        "detail.subtasks": "Subtasks",
        "detail.newSubtask": "+ New subtask",
        "detail.priority": "Priority",
        "detail.category": "Category",
        "detail.assignees": "Assigned to",
        "detail.tags": "Tags",
        "detail.dates": "Dates",
        "field.title": "Title",
        "field.description": "Description",
        "field.notes": "Notes",
        "field.created": "Created",
        "field.started": "Started",
        "field.due": "Due",
        "field.completed": "Completed",
        "search.title": "Search",
        "search.placeholder": "Search in tasks... (#tag @user !priority)",
        "search.empty": "No matching tasks",
        "search.filters": "Filters:",
        "status.saved": "Saved {path}",
        "status.saveFailed": "Save failed: {error}",
        "status.projectLoaded": 'Project "{name}" loaded',
        "status.actionFailed": "Action failed: {error}",
        "status.editing": "Editing {field}: Enter to apply, Esc to cancel",
        "footer.hints": "{nav} move  {select} open  {delete} delete  {move} shift column  {search} search  {save} save  {back} back  q quit",
        "projects.none": "No recent projects.",
        "projects.header": "Recent projects:",
    },
    "fr": {
        "confirm.title": "Confirmer",
        "confirm.cancel": "Annuler",
        "confirm.ok": "Supprimer",
        "confirm.deleteTask.title": "Supprimer la tâche",
        "confirm.deleteTask": 'Supprimer définitivement la tâche "{title}" ? Cette action est irréversible.',
        "confirm.deleteSubtask.title": "Supprimer la sous-tâche",
        "confirm.deleteSubtask": 'Supprimer la sous-tâche "{title}" ?',
        "confirm.deleteProject.title": "Retirer le projet",
        "confirm.deleteProject": 'Retirer le projet "{name}" de la liste ? Vos fichiers ne seront pas supprimés.',
        "board.newTask": "+ Nouvelle tâche",
        "board.noTasks": "Aucune tâche",
        "board.untitled": "(sans titre)",
        "sidebar.title": "Projets",
        "sidebar.empty": "Aucun projet récent",
        "detail.meta": "Détails",
        "detail.editor": "Tâche",
        "detail.subtasks": "Sous-tâches",
        "detail.newSubtask": "+ Nouvelle sous-tâche",
        "detail.priority": "Priorité",
        "detail.category": "Catégorie",
        "detail.assignees": "Assigné à",
        "detail.tags": "Tags",
        "detail.dates": "Dates",
        "field.title": "Titre",
        "field.description": "Description",
        "field.notes": "Notes",
        "field.created": "Création",
        "field.started": "Début",
        "field.due": "Échéance",
        "field.completed": "Terminé",
        "search.title": "Recherche",
        "search.placeholder": "Rechercher dans les tâches... (#tag @user !priorité)",
        "search.empty": "Aucune tâche trouvée",
        "search.filters": "Filtres :",
        "status.saved": "Enregistré {path}",
        "status.saveFailed": "Échec de l'enregistrement : {error}",
        "status.projectLoaded": 'Projet "{name}" chargé',
        "status.actionFailed": "Échec de l'action : {error}",
        "status.editing": "Édition de {field} : Entrée pour valider, Échap pour annuler",
        "projects.none": "Aucun projet récent.",
        "projects.header": "Projets récents :",
    },
    "zh": {
        "confirm.title": "确认",
        "confirm.cancel": "取消",
        "confirm.ok": "删除",
        "confirm.deleteTask.title": "删除任务",
        "confirm.deleteTask": '确定要删除任务 "{title}" 吗？此操作无法撤销。',
        "confirm.deleteSubtask.title": "删除子任务",
        "confirm.deleteSubtask": '确定要删除子任务 "{title}" 吗？',
        "confirm.deleteProject.title": "删除项目",
        "confirm.deleteProject": '确定要从列表中移除项目 "{name}" 吗？文件不会被删除。',
        "board.newTask": "+ 新任务",
        "board.noTasks": "没有任务",
        "board.untitled": "（无标题）",
        "sidebar.title": "项目",
        "sidebar.empty": "没有最近的项目",
        "detail.meta": "详情",
        "detail.editor": "任务",
        "detail.subtasks": "子任务",
        "detail.newSubtask": "+ 新子任务",
        "detail.priority": "优先级",
        "detail.category": "分类",
        "detail.assignees": "负责人",
        "detail.tags": "标签",
        "detail.dates": "日期",
        "field.title": "标题",
        "field.description": "描述",
        "field.notes": "备注",
        "field.created": "创建",
        "field.started": "开始",
        "field.due": "截止",
        "field.completed": "完成",
        "search.title": "搜索",
        "search.placeholder": "搜索任务... (#标签 @用户 !优先级)",
        "search.empty": "没有匹配的任务",
        "search.filters": "筛选：",
        "status.saved": "已保存 {path}",
        "status.saveFailed": "保存失败：{error}",
        "status.projectLoaded": '已加载项目 "{name}"',
        "status.actionFailed": "操作失败：{error}",
        "status.editing": "正在编辑 {field}：Enter 确认，Esc 取消",
        "projects.none": "没有最近的项目。",
        "projects.header": "最近的项目：",
    },
}
